"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.part import Part
from ..types.vehicle import Vehicle


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Vehicle mutations
    @strawberry.mutation(name="addVehicle")
    async def add_vehicle(
        self, info: strawberry.Info, name: str, manufacturer: str, year: int
    ) -> Vehicle:
        """Create a vehicle with a random joke attached."""
        from ..resolvers.vehicle import add_vehicle

        return await add_vehicle(info, name, manufacturer, year)

    @strawberry.mutation(name="updateVehicle")
    async def update_vehicle(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str,
        manufacturer: str,
        year: int,
    ) -> Vehicle | None:
        """Update a vehicle's name, manufacturer and year."""
        from ..resolvers.vehicle import update_vehicle

        return await update_vehicle(info, id, name, manufacturer, year)

    # Part mutations
    @strawberry.mutation(name="addPart")
    async def add_part(
        self, info: strawberry.Info, name: str, price: int, vehicle_id: strawberry.ID
    ) -> Part:
        """Create a part and attach it to a vehicle."""
        from ..resolvers.part import add_part

        return await add_part(info, name, price, vehicle_id)

    @strawberry.mutation(name="deletePart")
    async def delete_part(self, info: strawberry.Info, id: strawberry.ID) -> Part | None:
        """Delete a part and detach it from its vehicle."""
        from ..resolvers.part import delete_part

        return await delete_part(info, id)
