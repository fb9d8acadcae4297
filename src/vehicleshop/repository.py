"""Repository helpers for the vehicles and parts collections."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any
from uuid import UUID

from sqlalchemy import Text, delete, func, literal, or_, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from .dbmodels import Parts, Vehicles


async def list_vehicles(
    session: AsyncSession, *, manufacturer: str | None = None
) -> Sequence[Vehicles]:
    stmt = select(Vehicles)
    if manufacturer is not None:
        stmt = stmt.where(Vehicles.manufacturer == manufacturer)
    res = await session.execute(stmt)
    return res.scalars().all()


async def get_vehicle(
    session: AsyncSession, vehicle_id: UUID, *, for_update: bool = False
) -> Vehicles | None:
    stmt = select(Vehicles).where(Vehicles.id == vehicle_id)
    if for_update:
        stmt = stmt.with_for_update()
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def insert_vehicle(
    session: AsyncSession,
    *,
    name: str,
    manufacturer: str,
    year: int,
    joke: dict[str, Any],
) -> Vehicles:
    vehicle = Vehicles()
    vehicle.name = name
    vehicle.manufacturer = manufacturer
    vehicle.year = year
    vehicle.joke = joke
    vehicle.part_ids = []
    session.add(vehicle)
    await session.flush()
    return vehicle


async def update_vehicle(
    session: AsyncSession,
    vehicle_id: UUID,
    *,
    name: str,
    manufacturer: str,
    year: int,
) -> int:
    """Overwrite a vehicle's scalar fields and return the number of modified rows.

    The joke and parts columns are left alone, so a part pushed meanwhile
    survives. A row whose name, manufacturer and year already equal the
    submitted values is matched but not modified, so it is not counted.
    """
    stmt = (
        update(Vehicles)
        .where(
            Vehicles.id == vehicle_id,
            or_(
                Vehicles.name != name,
                Vehicles.manufacturer != manufacturer,
                Vehicles.year != year,
            ),
        )
        .values(name=name, manufacturer=manufacturer, year=year)
        .execution_options(synchronize_session=False)
    )
    res = await session.execute(stmt)
    return res.rowcount


def _dialect_name(session: AsyncSession) -> str:
    return session.bind.dialect.name


async def push_part(session: AsyncSession, vehicle_id: UUID, part_id: UUID) -> int:
    """Append a part id to the end of the vehicle's parts list.

    The append happens inside a single UPDATE so concurrent pushes to the
    same vehicle cannot overwrite each other.

    Returns:
        Number of vehicles modified (0 if the vehicle is gone)
    """
    needle = str(part_id)
    dialect = _dialect_name(session)

    if dialect == "postgresql":
        appended = Vehicles.part_ids.op("||")(func.jsonb_build_array(literal(needle, Text)))
    elif dialect == "sqlite":
        appended = func.json_insert(Vehicles.part_ids, "$[#]", needle)
    else:
        vehicle = await get_vehicle(session, vehicle_id, for_update=True)
        if vehicle is None:
            return 0
        vehicle.part_ids = [*vehicle.part_ids, needle]
        await session.flush()
        return 1

    stmt = (
        update(Vehicles)
        .where(Vehicles.id == vehicle_id)
        .values(part_ids=appended)
        .execution_options(synchronize_session=False)
    )
    res = await session.execute(stmt)
    return res.rowcount


_SQLITE_PULL_PART = text(
    """
    UPDATE vehicles
    SET parts = (
        SELECT json_group_array(elem.value)
        FROM json_each(vehicles.parts) AS elem
        WHERE elem.value != :part_id
    )
    WHERE EXISTS (
        SELECT 1 FROM json_each(vehicles.parts) AS elem WHERE elem.value = :part_id
    )
    """
)


async def pull_part(session: AsyncSession, part_id: UUID) -> int:
    """Remove every occurrence of a part id from all vehicles listing it.

    Only vehicles containing the id are touched, in a single UPDATE.

    Returns:
        Number of vehicles whose parts list changed
    """
    needle = str(part_id)
    dialect = _dialect_name(session)

    if dialect == "postgresql":
        # jsonb - text drops every array element equal to the string
        stmt = (
            update(Vehicles)
            .where(Vehicles.part_ids.op("@>")(func.jsonb_build_array(literal(needle, Text))))
            .values(part_ids=Vehicles.part_ids.op("-")(literal(needle, Text)))
            .execution_options(synchronize_session=False)
        )
        res = await session.execute(stmt)
        return res.rowcount

    if dialect == "sqlite":
        res = await session.execute(_SQLITE_PULL_PART, {"part_id": needle})
        return res.rowcount

    stmt = select(Vehicles).with_for_update()
    modified = 0
    for vehicle in (await session.execute(stmt)).scalars():
        if needle in vehicle.part_ids:
            vehicle.part_ids = [pid for pid in vehicle.part_ids if pid != needle]
            modified += 1
    await session.flush()
    return modified


async def list_parts(session: AsyncSession) -> Sequence[Parts]:
    res = await session.execute(select(Parts))
    return res.scalars().all()


async def get_part(session: AsyncSession, part_id: UUID) -> Parts | None:
    stmt = select(Parts).where(Parts.id == part_id)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def find_parts(session: AsyncSession, part_ids: Iterable[str | UUID]) -> Sequence[Parts]:
    """Fetch the parts whose id is a member of ``part_ids``.

    Rows come back in store order and each part appears once, however many
    times its id is listed.
    """
    ids = {UUID(str(pid)) for pid in part_ids}
    if not ids:
        return []
    res = await session.execute(select(Parts).where(Parts.id.in_(ids)))
    return res.scalars().all()


async def insert_part(
    session: AsyncSession, *, name: str, price: int, vehicle_id: UUID
) -> Parts:
    part = Parts()
    part.name = name
    part.price = price
    part.vehicle_id = vehicle_id
    session.add(part)
    await session.flush()
    return part


async def delete_part(session: AsyncSession, part_id: UUID) -> int:
    """Delete a part and return the number of removed rows."""
    stmt = delete(Parts).where(Parts.id == part_id).execution_options(synchronize_session=False)
    res = await session.execute(stmt)
    return res.rowcount
