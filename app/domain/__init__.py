"""Domain layer: models, schemas, validators, exceptions. Pure business logic only."""

from app.domain.exceptions import (
    DomainError,
    NotFoundError,
    UnknownLocationTypeError,
    UnreadableLocationError,
    ValidationError,
)
from app.domain.models import (
    AddLocation,
    DataOutput,
    ErrorOutput,
    Location,
    LocationStatus,
    LocationUpdateLogEvent,
    LocationUpdateStatus,
    ReaderOutput,
    StoredLocationRecord,
)
from app.domain.schemas import (
    AddLocationRequest,
    CurrentStatusSchema,
    LocationResponse,
    LocationSchema,
    LocationUpdateLogEventResponse,
)
from app.domain.validators import validate_add_location, validate_reader_outputs

__all__ = [
    "AddLocation",
    "AddLocationRequest",
    "CurrentStatusSchema",
    "DataOutput",
    "DomainError",
    "ErrorOutput",
    "Location",
    "LocationResponse",
    "LocationSchema",
    "LocationStatus",
    "LocationUpdateLogEvent",
    "LocationUpdateLogEventResponse",
    "LocationUpdateStatus",
    "NotFoundError",
    "ReaderOutput",
    "StoredLocationRecord",
    "UnknownLocationTypeError",
    "UnreadableLocationError",
    "ValidationError",
    "validate_add_location",
    "validate_reader_outputs",
]
