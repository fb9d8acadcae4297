"""
Root GraphQL query definitions
"""

import strawberry

from ..types.part import Part
from ..types.vehicle import Vehicle


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def vehicles(self, info: strawberry.Info) -> list[Vehicle]:
        """Get all vehicles."""
        from ..resolvers.vehicle import resolve_vehicles

        return await resolve_vehicles(info)

    @strawberry.field
    async def vehicle(self, info: strawberry.Info, id: strawberry.ID) -> Vehicle | None:
        """Get a vehicle by ID."""
        from ..resolvers.vehicle import resolve_vehicle_by_id

        return await resolve_vehicle_by_id(info, id)

    @strawberry.field
    async def parts(self, info: strawberry.Info) -> list[Part]:
        """Get all parts."""
        from ..resolvers.part import resolve_parts

        return await resolve_parts(info)

    @strawberry.field(name="vehiclesByManufacturer")
    async def vehicles_by_manufacturer(
        self, info: strawberry.Info, manufacturer: str
    ) -> list[Vehicle]:
        """Get vehicles whose manufacturer matches exactly."""
        from ..resolvers.vehicle import resolve_vehicles_by_manufacturer

        return await resolve_vehicles_by_manufacturer(info, manufacturer)

    @strawberry.field(name="partsByVehicle")
    async def parts_by_vehicle(self, info: strawberry.Info, vehicle_id: strawberry.ID) -> list[Part]:
        """Get the parts of a vehicle."""
        from ..resolvers.part import resolve_parts_by_vehicle

        return await resolve_parts_by_vehicle(info, vehicle_id)

    @strawberry.field(name="vehiclesByYearRange")
    async def vehicles_by_year_range(
        self, info: strawberry.Info, start_year: int, end_year: int
    ) -> list[Vehicle]:
        """Get vehicles built between startYear and endYear, inclusive."""
        from ..resolvers.vehicle import resolve_vehicles_by_year_range

        return await resolve_vehicles_by_year_range(info, start_year, end_year)
