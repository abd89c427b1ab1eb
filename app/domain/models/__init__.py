"""Domain models. Pure business entities."""

from app.domain.models.location import (
    AddLocation,
    Location,
    LocationStatus,
    LocationUpdateLogEvent,
    LocationUpdateStatus,
    StoredLocationRecord,
)
from app.domain.models.reader_output import DataOutput, ErrorOutput, ReaderOutput

__all__ = [
    "AddLocation",
    "DataOutput",
    "ErrorOutput",
    "Location",
    "LocationStatus",
    "LocationUpdateLogEvent",
    "LocationUpdateStatus",
    "ReaderOutput",
    "StoredLocationRecord",
]
