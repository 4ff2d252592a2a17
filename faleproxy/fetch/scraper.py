import asyncio
import datetime as dt
import logging
from typing import Optional

import httpx

from faleproxy.core.config import settings
from faleproxy.errors import FetchError
from .base import BaseFetcher, FetchResult

logger = logging.getLogger(__name__)

_BINARY_CONTENT_TYPES = (
    "image/",
    "audio/",
    "video/",
    "font/",
    "application/octet-stream",
    "application/pdf",
    "application/zip",
)

async def fetch_html(
    url: str,
    timeout: Optional[float] = None,
    max_bytes: Optional[int] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FetchResult:
    """
    Fetch a remote document with a single GET request.

    Every failure (bad URL, DNS, connection, non-2xx status, timeout,
    oversized or binary body) is raised as FetchError carrying the cause.
    The whole call is bounded by ``timeout`` seconds, and the coroutine
    can be cancelled by the caller at any point.
    """
    timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
    max_bytes = settings.MAX_CONTENT_BYTES if max_bytes is None else max_bytes

    try:
        return await asyncio.wait_for(
            _fetch(url, timeout, max_bytes, transport),
            timeout=timeout,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        raise FetchError(f"Timeout of {timeout}s exceeded while fetching {url}") from e
    except httpx.HTTPStatusError as e:
        raise FetchError(f"Request failed with status code {e.response.status_code}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(str(e) or type(e).__name__) from e

async def _fetch(
    url: str,
    timeout: float,
    max_bytes: int,
    transport: Optional[httpx.AsyncBaseTransport],
) -> FetchResult:
    headers = {
        "User-Agent": settings.USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        transport=transport,
    ) as client:
        async with client.stream("GET", url) as response:
            response.raise_for_status()

            content_type = response.headers.get("content-type")
            if content_type and content_type.lower().startswith(_BINARY_CONTENT_TYPES):
                raise FetchError(f"Unsupported content type: {content_type}")

            declared = response.headers.get("content-length")
            if declared and declared.isdigit() and int(declared) > max_bytes:
                raise FetchError(f"Response body exceeds {max_bytes} bytes")

            chunks = []
            received = 0
            async for chunk in response.aiter_bytes():
                received += len(chunk)
                if received > max_bytes:
                    raise FetchError(f"Response body exceeds {max_bytes} bytes")
                chunks.append(chunk)

            html = _decode(b"".join(chunks), response.encoding)
            logger.info("Fetched %s: status %d, %d bytes", url, response.status_code, received)

            return FetchResult(
                url=url,
                final_url=str(response.url),
                status_code=response.status_code,
                html=html,
                content_type=content_type,
                fetched_at=dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
            )

def _decode(body: bytes, encoding: Optional[str]) -> str:
    try:
        return body.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        # unknown charset label in Content-Type
        return body.decode("utf-8", errors="replace")

class HttpxFetcher(BaseFetcher):
    def __init__(self, max_bytes: Optional[int] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.max_bytes = max_bytes
        self.transport = transport

    async def fetch(self, url: str, timeout_sec: Optional[float] = None) -> FetchResult:
        return await fetch_html(url, timeout=timeout_sec, max_bytes=self.max_bytes, transport=self.transport)
