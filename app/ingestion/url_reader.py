"""URL location reader: fetches the target over HTTP(S) with httpx."""

from typing import List, Optional

import httpx

from app.config.settings import get_settings
from app.domain.models.reader_output import DataOutput, ErrorOutput, ReaderOutput

URL_LOCATION_TYPE = "url"


class UrlReader:
    """Reads locations of type 'url'. Non-2xx and transport failures become ErrorOutput."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout if timeout is not None else get_settings().url_reader_timeout_seconds
        self._transport = transport

    async def try_read(self, type: str, target: str) -> Optional[List[ReaderOutput]]:
        if type != URL_LOCATION_TYPE:
            return None
        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            try:
                response = await client.get(target)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                return [ErrorOutput(error=str(e) or e.__class__.__name__)]
        if not response.is_success:
            return [ErrorOutput(error=f"{response.status_code} {response.reason_phrase}")]
        return [DataOutput(data=response.text)]
