"""Domain model for catalog locations. Pure business semantics, no ORM or infrastructure."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class LocationUpdateStatus(str, Enum):
    """Outcome recorded in the update log each time a location is ingested."""

    SUCCESS = "success"
    FAIL = "fail"


@dataclass(frozen=True)
class AddLocation:
    """Unpersisted location candidate. Storage assigns the id."""

    type: str
    target: str


@dataclass(frozen=True)
class Location:
    """Persisted pointer to an external source of catalog content. id is immutable once assigned."""

    id: str
    type: str
    target: str


@dataclass(frozen=True)
class LocationUpdateLogEvent:
    """One append-only status transition for a location."""

    id: int
    location_id: str
    status: LocationUpdateStatus
    created_at: datetime
    message: Optional[str] = None


@dataclass(frozen=True)
class LocationStatus:
    """Current status of a location: fields of its latest update-log event, or all None."""

    message: Optional[str] = None
    status: Optional[LocationUpdateStatus] = None
    timestamp: Optional[datetime] = None


@dataclass(frozen=True)
class StoredLocationRecord:
    """Storage boundary shape: the location itself plus its current status, kept apart."""

    data: Location
    current_status: LocationStatus = field(default_factory=LocationStatus)

    def as_flat_dict(self) -> Dict[str, Any]:
        """Reassemble the flat stored row {id, type, target, message, status, timestamp}."""
        return {
            "id": self.data.id,
            "type": self.data.type,
            "target": self.data.target,
            "message": self.current_status.message,
            "status": self.current_status.status,
            "timestamp": self.current_status.timestamp,
        }
