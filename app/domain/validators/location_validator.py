"""Validators for location domain rules. Pure functions, no infrastructure or DB access."""

from typing import Optional, Sequence

from app.domain.exceptions import (
    UnknownLocationTypeError,
    UnreadableLocationError,
    ValidationError,
)
from app.domain.models.location import AddLocation
from app.domain.models.reader_output import ErrorOutput, ReaderOutput


def validate_add_location(candidate: AddLocation) -> None:
    """Enforce candidate shape: type and target must be non-empty. Raises ValidationError if invalid."""
    if not candidate.type or not candidate.type.strip():
        raise ValidationError("location type must not be empty")
    if not candidate.target or not candidate.target.strip():
        raise ValidationError("location target must not be empty")


def validate_reader_outputs(
    candidate: AddLocation,
    outputs: Optional[Sequence[ReaderOutput]],
) -> None:
    """
    Check what an ingestion reader returned for the candidate.
    None means no reader recognized the type; the first ErrorOutput aborts.
    """
    if outputs is None:
        raise UnknownLocationTypeError(candidate.type, candidate.target)
    for output in outputs:
        if isinstance(output, ErrorOutput):
            raise UnreadableLocationError(candidate.target, output.error)
