"""Ingestion model that dispatches to a list of readers; the first reader that recognizes the type answers."""

import logging
from typing import List, Optional, Sequence

from app.domain.models.reader_output import ReaderOutput
from app.ingestion.interface import LocationReader

logger = logging.getLogger(__name__)


class ReaderIngestionModel:
    """Implements IngestionModel over an ordered sequence of LocationReader."""

    def __init__(self, readers: Sequence[LocationReader]) -> None:
        self._readers = list(readers)

    async def read_location(self, type: str, target: str) -> Optional[List[ReaderOutput]]:
        for reader in self._readers:
            outputs = await reader.try_read(type, target)
            if outputs is not None:
                logger.info(
                    "location_read",
                    extra={
                        "reader": reader.__class__.__name__,
                        "location_type": type,
                        "outputs": len(outputs),
                    },
                )
                return outputs
        logger.info(
            "location_type_unrecognized",
            extra={"location_type": type},
        )
        return None
