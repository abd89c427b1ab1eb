"""Ingestion reader outputs. A tagged variant: each output is either data or an error."""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class DataOutput:
    """Content successfully read from a location target."""

    data: Any


@dataclass(frozen=True)
class ErrorOutput:
    """Failure reported by a reader for a location target."""

    error: str


ReaderOutput = Union[DataOutput, ErrorOutput]
