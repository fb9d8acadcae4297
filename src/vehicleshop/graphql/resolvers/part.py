from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ... import repository
from ...dbmodels import Parts
from ...logging import get_logger
from ..context import get_session, parse_id

if TYPE_CHECKING:
    from ..types.part import Part
    from ..types.vehicle import Vehicle

logger = get_logger(__name__)


def part_from_row(row: Parts) -> Part:
    """Convert a stored part into its GraphQL type."""
    from ..types.part import Part as PartType

    return PartType(
        id=strawberry.ID(str(row.id)),
        name=row.name,
        price=row.price,
        owner_id=str(row.vehicle_id),
    )


# Query resolvers
async def resolve_parts(info: strawberry.Info) -> list[Part]:
    async with get_session(info) as session:
        rows = await repository.list_parts(session)
        return [part_from_row(row) for row in rows]


async def resolve_parts_by_vehicle(info: strawberry.Info, vehicle_id: strawberry.ID) -> list[Part]:
    """Resolve the parts listed on a vehicle. Fails if the vehicle is missing."""
    owner_id = parse_id(vehicle_id)

    async with get_session(info) as session:
        vehicle = await repository.get_vehicle(session, owner_id)
        if not vehicle:
            raise RuntimeError("Vehicle not found on 'partsByVehicle' Query.")

        rows = await repository.find_parts(session, vehicle.part_ids or [])
        return [part_from_row(row) for row in rows]


# Field resolvers
async def resolve_part_vehicle(part: Part, info: strawberry.Info) -> Vehicle:
    """Resolve the vehicle a part points back to. Fails for orphaned parts."""
    from .vehicle import vehicle_from_row

    async with get_session(info) as session:
        vehicle = await repository.get_vehicle(session, parse_id(part.owner_id))
        if not vehicle:
            logger.warning("Part references a missing vehicle", part_id=str(part.id))
            raise RuntimeError("Error finding vehicle linked to part in DB")
        return vehicle_from_row(vehicle)


# Mutation resolvers
async def add_part(
    info: strawberry.Info, name: str, price: int, vehicle_id: strawberry.ID
) -> Part:
    """
    Create a part and append its id to the owning vehicle's parts list.

    Both writes share one session, so the part is not kept if linking fails.
    The id is appended by the store itself, so concurrent additions to the
    same vehicle all end up linked.
    """
    owner_id = parse_id(vehicle_id)

    async with get_session(info) as session:
        vehicle = await repository.get_vehicle(session, owner_id)
        if not vehicle:
            raise RuntimeError(f"No vehicle found with id:{vehicle_id} in DB.")

        row = await repository.insert_part(session, name=name, price=price, vehicle_id=owner_id)
        if await repository.push_part(session, owner_id, row.id) == 0:
            raise RuntimeError(f"Error linking part to vehicle with id:{vehicle_id}")

        logger.info("Part created", part_id=str(row.id), vehicle_id=str(owner_id))
        return part_from_row(row)


async def delete_part(info: strawberry.Info, id: strawberry.ID) -> Part | None:
    """
    Delete a part and pull its id out of every vehicle that lists it.

    Returns the part as it was before deletion.
    """
    part_id = parse_id(id)

    async with get_session(info) as session:
        existing = await repository.get_part(session, part_id)
        if not existing:
            raise RuntimeError(f"No part found with id:{id} in DB.")
        deleted_part = part_from_row(existing)

        removed = await repository.delete_part(session, part_id)
        if removed == 0:
            raise RuntimeError("Error deleting part")

        unlinked = await repository.pull_part(session, part_id)
        logger.info("Part deleted", part_id=str(part_id), vehicles_unlinked=unlinked)
        return deleted_part
