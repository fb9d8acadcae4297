"""
Vehicle GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from .joke import Joke

if TYPE_CHECKING:
    from .part import Part


@strawberry.type
class Vehicle:
    """Vehicle type for GraphQL API."""

    id: strawberry.ID
    name: str
    manufacturer: str
    year: int
    joke: Joke
    part_ids: strawberry.Private[list[str]]

    @strawberry.field
    async def parts(self, info: strawberry.Info) -> list[Annotated["Part", strawberry.lazy(".part")]]:
        """Get the parts referenced by this vehicle."""
        from ..resolvers.vehicle import resolve_vehicle_parts

        return await resolve_vehicle_parts(self, info)
