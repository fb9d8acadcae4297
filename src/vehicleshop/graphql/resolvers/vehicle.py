from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import UUID

import strawberry

from ... import repository
from ...dbmodels import Vehicles
from ...logging import get_logger
from ..context import get_joke_client, get_session, parse_id
from .part import part_from_row

if TYPE_CHECKING:
    from ..types.part import Part
    from ..types.vehicle import Vehicle

logger = get_logger(__name__)


def build_vehicle(
    *,
    id: UUID,
    name: str,
    manufacturer: str,
    year: int,
    joke: dict[str, Any],
    part_ids: list[str] | None,
) -> Vehicle:
    """Assemble the GraphQL vehicle from stored document fields."""
    from ..types.joke import Joke
    from ..types.vehicle import Vehicle as VehicleType

    return VehicleType(
        id=strawberry.ID(str(id)),
        name=name,
        manufacturer=manufacturer,
        year=year,
        joke=Joke.from_document(joke),
        part_ids=list(part_ids or []),
    )


def vehicle_from_row(row: Vehicles) -> Vehicle:
    """Convert a stored vehicle into its GraphQL type."""
    return build_vehicle(
        id=row.id,
        name=row.name,
        manufacturer=row.manufacturer,
        year=row.year,
        joke=row.joke,
        part_ids=row.part_ids,
    )


# Query resolvers
async def resolve_vehicles(info: strawberry.Info) -> list[Vehicle]:
    async with get_session(info) as session:
        rows = await repository.list_vehicles(session)
        return [vehicle_from_row(row) for row in rows]


async def resolve_vehicle_by_id(info: strawberry.Info, id: strawberry.ID) -> Vehicle | None:
    """
    Resolve a vehicle by its ID.

    A missing vehicle resolves to null rather than an error.
    """
    vehicle_id = parse_id(id)

    async with get_session(info) as session:
        row = await repository.get_vehicle(session, vehicle_id)
        if not row:
            logger.info("Vehicle not found", vehicle_id=str(vehicle_id))
            return None
        return vehicle_from_row(row)


async def resolve_vehicles_by_manufacturer(
    info: strawberry.Info, manufacturer: str
) -> list[Vehicle]:
    async with get_session(info) as session:
        rows = await repository.list_vehicles(session, manufacturer=manufacturer)
        return [vehicle_from_row(row) for row in rows]


async def resolve_vehicles_by_year_range(
    info: strawberry.Info, start_year: int, end_year: int
) -> list[Vehicle]:
    """
    Resolve vehicles built between two years, both ends inclusive.

    All vehicles are loaded and filtered in process.
    """
    async with get_session(info) as session:
        rows = await repository.list_vehicles(session)
        return [vehicle_from_row(row) for row in rows if start_year <= row.year <= end_year]


# Field resolvers
async def resolve_vehicle_parts(vehicle: Vehicle, info: strawberry.Info) -> list[Part]:
    """Resolve the parts listed on a vehicle by id membership."""
    async with get_session(info) as session:
        rows = await repository.find_parts(session, vehicle.part_ids)
        return [part_from_row(row) for row in rows]


# Mutation resolvers
async def add_vehicle(info: strawberry.Info, name: str, manufacturer: str, year: int) -> Vehicle:
    """
    Create a vehicle with an empty parts list and a freshly fetched joke.

    A failed joke fetch fails the mutation; nothing is stored in that case.
    """
    joke = await get_joke_client(info).fetch_random_joke()

    async with get_session(info) as session:
        row = await repository.insert_vehicle(
            session,
            name=name,
            manufacturer=manufacturer,
            year=year,
            joke=joke.model_dump(),
        )
        logger.info("Vehicle created", vehicle_id=str(row.id), joke_id=joke.id)
        return vehicle_from_row(row)


async def update_vehicle(
    info: strawberry.Info,
    id: strawberry.ID,
    name: str,
    manufacturer: str,
    year: int,
) -> Vehicle | None:
    """
    Overwrite a vehicle's name, manufacturer and year.

    The joke and the parts list keep their stored values. Fails when the
    store reports no modified row, which includes submitting the values the
    vehicle already has.
    """
    vehicle_id = parse_id(id)

    async with get_session(info) as session:
        existing = await repository.get_vehicle(session, vehicle_id)
        if not existing:
            raise RuntimeError(f"No vehicle found with id:{id} in DB.")

        modified = await repository.update_vehicle(
            session, vehicle_id, name=name, manufacturer=manufacturer, year=year
        )
        if modified == 0:
            logger.info("Vehicle update modified nothing", vehicle_id=str(vehicle_id))
            raise RuntimeError("Error updating vehicle")

        logger.info("Vehicle updated", vehicle_id=str(vehicle_id))
        return build_vehicle(
            id=vehicle_id,
            name=name,
            manufacturer=manufacturer,
            year=year,
            joke=existing.joke,
            part_ids=existing.part_ids,
        )
