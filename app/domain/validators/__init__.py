"""Domain validators. Pure validation functions."""

from app.domain.validators.location_validator import (
    validate_add_location,
    validate_reader_outputs,
)

__all__ = [
    "validate_add_location",
    "validate_reader_outputs",
]
