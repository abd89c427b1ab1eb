"""Domain schemas. Request/response and validation."""

from app.domain.schemas.location import (
    AddLocationRequest,
    CurrentStatusSchema,
    LocationResponse,
    LocationSchema,
    LocationUpdateLogEventResponse,
)

__all__ = [
    "AddLocationRequest",
    "CurrentStatusSchema",
    "LocationResponse",
    "LocationSchema",
    "LocationUpdateLogEventResponse",
]
