"""DB-backed location repository. Persists locations and their update log (locations, location_update_log tables)."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.domain.exceptions import NotFoundError
from app.domain.models.location import (
    AddLocation,
    Location,
    LocationStatus,
    LocationUpdateLogEvent,
    LocationUpdateStatus,
    StoredLocationRecord,
)
from app.infrastructure.database.models import LocationRow, LocationUpdateLogRow


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo; stored values are always UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_location(row: LocationRow) -> Location:
    return Location(id=row.id, type=row.type, target=row.target)


def _to_event(row: LocationUpdateLogRow) -> LocationUpdateLogEvent:
    return LocationUpdateLogEvent(
        id=row.id,
        location_id=row.location_id,
        status=LocationUpdateStatus(row.status),
        created_at=_as_utc(row.created_at),
        message=row.message,
    )


def _to_record(row: LocationRow, log: Optional[LocationUpdateLogRow]) -> StoredLocationRecord:
    if log is None:
        return StoredLocationRecord(data=_to_location(row))
    return StoredLocationRecord(
        data=_to_location(row),
        current_status=LocationStatus(
            message=log.message,
            status=LocationUpdateStatus(log.status),
            timestamp=_as_utc(log.created_at),
        ),
    )


def _with_latest_log():
    """Select each location left-joined with its most recent update-log row."""
    log = aliased(LocationUpdateLogRow)
    latest_log_id = (
        select(log.id)
        .where(log.location_id == LocationRow.id)
        .order_by(log.created_at.desc(), log.id.desc())
        .limit(1)
        .correlate(LocationRow)
        .scalar_subquery()
    )
    return select(LocationRow, LocationUpdateLogRow).outerjoin(
        LocationUpdateLogRow,
        LocationUpdateLogRow.id == latest_log_id,
    )


class DbLocationRepository:
    """Persists locations to the database. Implements LocationRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _get_row(self, location_id: str) -> LocationRow:
        row = await self._session.get(LocationRow, location_id)
        if row is None:
            raise NotFoundError(f"Found no location with ID {location_id}")
        return row

    async def add_location(self, location: AddLocation) -> Location:
        """Insert the location; id is generated here. Commit and return the persisted Location."""
        row = LocationRow(type=location.type, target=location.target)
        self._session.add(row)
        await self._session.flush()
        await self._session.commit()
        await self._session.refresh(row)
        return _to_location(row)

    async def remove_location(self, location_id: str) -> None:
        """Hard-delete the location and its update log. Raises NotFoundError if absent."""
        row = await self._get_row(location_id)
        await self._session.execute(
            delete(LocationUpdateLogRow).where(LocationUpdateLogRow.location_id == location_id)
        )
        await self._session.delete(row)
        await self._session.commit()

    async def locations(self) -> List[StoredLocationRecord]:
        result = await self._session.execute(_with_latest_log().order_by(LocationRow.created_at))
        return [_to_record(row, log) for row, log in result.all()]

    async def location(self, location_id: str) -> StoredLocationRecord:
        stmt = _with_latest_log().where(LocationRow.id == location_id)
        result = await self._session.execute(stmt)
        found = result.first()
        if found is None:
            raise NotFoundError(f"Found no location with ID {location_id}")
        row, log = found
        return _to_record(row, log)

    async def location_history(self, location_id: str) -> List[LocationUpdateLogEvent]:
        """Update log of the location, oldest first. Raises NotFoundError if the location is absent."""
        await self._get_row(location_id)
        stmt = (
            select(LocationUpdateLogRow)
            .where(LocationUpdateLogRow.location_id == location_id)
            .order_by(LocationUpdateLogRow.created_at, LocationUpdateLogRow.id)
        )
        result = await self._session.execute(stmt)
        return [_to_event(row) for row in result.scalars().all()]

    async def add_location_update_log_event(
        self,
        location_id: str,
        status: LocationUpdateStatus,
        message: Optional[str] = None,
    ) -> LocationUpdateLogEvent:
        """Append one status transition. Raises NotFoundError if the location is absent."""
        await self._get_row(location_id)
        row = LocationUpdateLogRow(
            location_id=location_id,
            status=LocationUpdateStatus(status).value,
            message=message,
        )
        self._session.add(row)
        await self._session.flush()
        await self._session.commit()
        await self._session.refresh(row)
        return _to_event(row)
