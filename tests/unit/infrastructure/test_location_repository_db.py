"""Tests for DbLocationRepository against in-memory SQLite."""

from datetime import datetime

import pytest

from app.domain.exceptions import NotFoundError
from app.domain.models.location import AddLocation, LocationUpdateStatus
from app.infrastructure.database.location_repository_db import DbLocationRepository


@pytest.fixture
def repository(db_session):
    return DbLocationRepository(session=db_session)


async def test_add_location_assigns_unique_ids(repository):
    first = await repository.add_location(AddLocation(type="url", target="http://x/a.yaml"))
    second = await repository.add_location(AddLocation(type="url", target="http://x/a.yaml"))

    assert first.id and second.id
    assert first.id != second.id
    assert (first.type, first.target) == ("url", "http://x/a.yaml")


async def test_location_without_log_has_empty_status(repository):
    added = await repository.add_location(AddLocation(type="file", target="/srv/catalog.yaml"))

    record = await repository.location(added.id)

    assert record.data == added
    assert record.current_status.message is None
    assert record.current_status.status is None
    assert record.current_status.timestamp is None


async def test_location_reports_latest_log_event(repository):
    added = await repository.add_location(AddLocation(type="url", target="http://x/a.yaml"))
    await repository.add_location_update_log_event(added.id, LocationUpdateStatus.FAIL, "404")
    latest = await repository.add_location_update_log_event(added.id, LocationUpdateStatus.SUCCESS)

    record = await repository.location(added.id)

    assert record.current_status.status == LocationUpdateStatus.SUCCESS
    assert record.current_status.message is None
    assert record.current_status.timestamp == latest.created_at
    assert record.current_status.timestamp.tzinfo is not None


async def test_locations_lists_every_location_with_its_own_status(repository):
    a = await repository.add_location(AddLocation(type="url", target="http://x/a.yaml"))
    b = await repository.add_location(AddLocation(type="url", target="http://x/b.yaml"))
    await repository.add_location_update_log_event(a.id, LocationUpdateStatus.SUCCESS, "ok")
    await repository.add_location_update_log_event(b.id, LocationUpdateStatus.FAIL, "first")
    await repository.add_location_update_log_event(b.id, LocationUpdateStatus.FAIL, "second")

    records = {r.data.id: r for r in await repository.locations()}

    assert set(records) == {a.id, b.id}
    assert records[a.id].current_status.message == "ok"
    assert records[b.id].current_status.message == "second"


async def test_locations_are_listed_in_insertion_order(repository):
    added = [
        await repository.add_location(AddLocation(type="url", target=f"http://x/{i}.yaml"))
        for i in range(5)
    ]
    await repository.add_location_update_log_event(added[3].id, LocationUpdateStatus.SUCCESS, "ok")
    await repository.add_location_update_log_event(added[0].id, LocationUpdateStatus.FAIL, "404")

    records = await repository.locations()

    assert [r.data.id for r in records] == [loc.id for loc in added]


async def test_location_history_is_oldest_first(repository):
    added = await repository.add_location(AddLocation(type="url", target="http://x/a.yaml"))
    for i in range(3):
        await repository.add_location_update_log_event(added.id, LocationUpdateStatus.SUCCESS, f"run-{i}")

    history = await repository.location_history(added.id)

    assert [e.message for e in history] == ["run-0", "run-1", "run-2"]
    assert all(e.location_id == added.id for e in history)
    assert all(isinstance(e.created_at, datetime) for e in history)
    assert [e.created_at for e in history] == sorted(e.created_at for e in history)


async def test_location_history_empty_for_new_location(repository):
    added = await repository.add_location(AddLocation(type="url", target="http://x/a.yaml"))

    assert await repository.location_history(added.id) == []


async def test_remove_location_deletes_location_and_history(repository):
    added = await repository.add_location(AddLocation(type="url", target="http://x/a.yaml"))
    await repository.add_location_update_log_event(added.id, LocationUpdateStatus.SUCCESS)

    await repository.remove_location(added.id)

    assert await repository.locations() == []
    with pytest.raises(NotFoundError):
        await repository.location(added.id)
    with pytest.raises(NotFoundError):
        await repository.location_history(added.id)


@pytest.mark.parametrize("operation", ["remove_location", "location", "location_history"])
async def test_unknown_id_raises_not_found(repository, operation):
    with pytest.raises(NotFoundError) as exc_info:
        await getattr(repository, operation)("missing-id")

    assert "missing-id" in exc_info.value.message


async def test_add_log_event_for_unknown_location_raises_not_found(repository):
    with pytest.raises(NotFoundError):
        await repository.add_location_update_log_event("missing-id", LocationUpdateStatus.FAIL, "x")
