"""
Tests for the vehicles/parts repository helpers
"""

import uuid

import pytest

from vehicleshop import repository

JOKE = {"id": 1, "type": "general", "setup": "s", "punchline": "p"}


@pytest.mark.integration
class TestVehicleRepository:

    @pytest.mark.asyncio
    async def test_insert_generates_id(self, db_session):
        vehicle = await repository.insert_vehicle(
            db_session, name="Model T", manufacturer="Ford", year=1920, joke=JOKE
        )
        await db_session.commit()

        assert isinstance(vehicle.id, uuid.UUID)
        assert vehicle.part_ids == []
        assert await repository.get_vehicle(db_session, vehicle.id) is vehicle

    @pytest.mark.asyncio
    async def test_list_vehicles_filters_by_manufacturer(self, db_session):
        await repository.insert_vehicle(
            db_session, name="Model T", manufacturer="Ford", year=1920, joke=JOKE
        )
        await repository.insert_vehicle(
            db_session, name="Beetle", manufacturer="Volkswagen", year=1938, joke=JOKE
        )

        everything = await repository.list_vehicles(db_session)
        fords = await repository.list_vehicles(db_session, manufacturer="Ford")

        assert len(everything) == 2
        assert [v.name for v in fords] == ["Model T"]

    @pytest.mark.asyncio
    async def test_update_counts_only_changed_rows(self, db_session):
        vehicle = await repository.insert_vehicle(
            db_session, name="Model T", manufacturer="Ford", year=1920, joke=JOKE
        )
        await db_session.commit()

        unchanged = await repository.update_vehicle(
            db_session,
            vehicle.id,
            name="Model T",
            manufacturer="Ford",
            year=1920,
        )
        changed = await repository.update_vehicle(
            db_session,
            vehicle.id,
            name="Model A",
            manufacturer="Ford",
            year=1927,
        )
        missing = await repository.update_vehicle(
            db_session,
            uuid.uuid4(),
            name="Model A",
            manufacturer="Ford",
            year=1927,
        )

        assert (unchanged, changed, missing) == (0, 1, 0)

    @pytest.mark.asyncio
    async def test_push_and_pull_part(self, db_session):
        first = await repository.insert_vehicle(
            db_session, name="Model T", manufacturer="Ford", year=1920, joke=JOKE
        )
        second = await repository.insert_vehicle(
            db_session, name="Model A", manufacturer="Ford", year=1927, joke=JOKE
        )
        part_id = uuid.uuid4()
        keep_id = uuid.uuid4()

        assert await repository.push_part(db_session, first.id, part_id) == 1
        assert await repository.push_part(db_session, first.id, keep_id) == 1
        assert await repository.push_part(db_session, second.id, part_id) == 1
        await db_session.refresh(first)
        assert first.part_ids == [str(part_id), str(keep_id)]

        unlinked = await repository.pull_part(db_session, part_id)
        await db_session.refresh(first)
        await db_session.refresh(second)

        assert unlinked == 2
        assert first.part_ids == [str(keep_id)]
        assert second.part_ids == []

    @pytest.mark.asyncio
    async def test_push_part_to_missing_vehicle(self, db_session):
        assert await repository.push_part(db_session, uuid.uuid4(), uuid.uuid4()) == 0

    @pytest.mark.asyncio
    async def test_pull_part_leaves_other_vehicles_alone(self, db_session):
        vehicle = await repository.insert_vehicle(
            db_session, name="Model T", manufacturer="Ford", year=1920, joke=JOKE
        )
        keep_id = uuid.uuid4()
        await repository.push_part(db_session, vehicle.id, keep_id)

        assert await repository.pull_part(db_session, uuid.uuid4()) == 0
        await db_session.refresh(vehicle)
        assert vehicle.part_ids == [str(keep_id)]

    @pytest.mark.asyncio
    async def test_update_leaves_parts_alone(self, db_session):
        vehicle = await repository.insert_vehicle(
            db_session, name="Model T", manufacturer="Ford", year=1920, joke=JOKE
        )
        part_id = uuid.uuid4()
        await repository.push_part(db_session, vehicle.id, part_id)

        changed = await repository.update_vehicle(
            db_session, vehicle.id, name="Model A", manufacturer="Ford", year=1927
        )
        await db_session.refresh(vehicle)

        assert changed == 1
        assert (vehicle.name, vehicle.year) == ("Model A", 1927)
        assert vehicle.part_ids == [str(part_id)]
        assert vehicle.joke == JOKE


@pytest.mark.integration
class TestPartRepository:

    @pytest.mark.asyncio
    async def test_insert_find_and_delete(self, db_session):
        owner = uuid.uuid4()
        wheel = await repository.insert_part(db_session, name="Wheel", price=50, vehicle_id=owner)
        horn = await repository.insert_part(db_session, name="Horn", price=5, vehicle_id=owner)
        await db_session.commit()

        found = await repository.find_parts(db_session, [str(wheel.id), str(wheel.id)])
        assert [p.id for p in found] == [wheel.id]

        assert await repository.delete_part(db_session, wheel.id) == 1
        assert await repository.delete_part(db_session, wheel.id) == 0
        await db_session.commit()

        remaining = await repository.list_parts(db_session)
        assert [p.id for p in remaining] == [horn.id]

    @pytest.mark.asyncio
    async def test_find_parts_with_no_ids(self, db_session):
        assert await repository.find_parts(db_session, []) == []

    @pytest.mark.asyncio
    async def test_get_part_missing(self, db_session):
        assert await repository.get_part(db_session, uuid.uuid4()) is None
