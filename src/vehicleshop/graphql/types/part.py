"""
Part GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .vehicle import Vehicle


@strawberry.type
class Part:
    """Part type for GraphQL API."""

    id: strawberry.ID
    name: str
    price: int
    owner_id: strawberry.Private[str]

    @strawberry.field(name="vehicleId")
    async def vehicle_id(
        self, info: strawberry.Info
    ) -> Annotated["Vehicle", strawberry.lazy(".vehicle")]:
        """Get the vehicle this part belongs to."""
        from ..resolvers.part import resolve_part_vehicle

        return await resolve_part_vehicle(self, info)
