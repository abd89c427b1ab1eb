"""File location reader: reads a path on the local filesystem."""

import asyncio
from pathlib import Path
from typing import List, Optional

from app.domain.models.reader_output import DataOutput, ErrorOutput, ReaderOutput

FILE_LOCATION_TYPE = "file"


class FileReader:
    """Reads locations of type 'file'. Missing or unreadable paths become ErrorOutput."""

    async def try_read(self, type: str, target: str) -> Optional[List[ReaderOutput]]:
        if type != FILE_LOCATION_TYPE:
            return None
        path = Path(target)
        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError, ValueError) as e:
            return [ErrorOutput(error=f"{e.__class__.__name__}: {e}")]
        return [DataOutput(data=content)]
