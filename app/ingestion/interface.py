"""Ingestion interfaces. Application layer depends on these protocols."""

from typing import List, Optional, Protocol

from app.domain.models.reader_output import ReaderOutput


class LocationReader(Protocol):
    """Reads one kind of location. Returns None when it does not handle the given type."""

    async def try_read(self, type: str, target: str) -> Optional[List[ReaderOutput]]:
        ...


class IngestionModel(Protocol):
    """Protocol for reading a location's content. None means the type+target is unrecognized."""

    async def read_location(self, type: str, target: str) -> Optional[List[ReaderOutput]]:
        ...
