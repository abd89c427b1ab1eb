"""Location repository protocol. Application layer depends on this; infrastructure implements it."""

from typing import List, Optional, Protocol

from app.domain.models.location import (
    AddLocation,
    Location,
    LocationUpdateLogEvent,
    LocationUpdateStatus,
    StoredLocationRecord,
)


class LocationRepository(Protocol):
    """Protocol for durable CRUD of locations and their update log. Raises NotFoundError for unknown ids."""

    async def add_location(self, location: AddLocation) -> Location:
        """Persist the candidate and return it with an assigned id."""
        ...

    async def remove_location(self, location_id: str) -> None:
        """Hard-delete a location and its update log."""
        ...

    async def locations(self) -> List[StoredLocationRecord]:
        """Return every location with its current status, in storage order."""
        ...

    async def location(self, location_id: str) -> StoredLocationRecord:
        """Return one location with its current status."""
        ...

    async def location_history(self, location_id: str) -> List[LocationUpdateLogEvent]:
        """Return the update log of a location, oldest first."""
        ...

    async def add_location_update_log_event(
        self,
        location_id: str,
        status: LocationUpdateStatus,
        message: Optional[str] = None,
    ) -> LocationUpdateLogEvent:
        """Append one status transition to the update log of a location."""
        ...
