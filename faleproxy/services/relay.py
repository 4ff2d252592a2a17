import logging
from typing import Any, Dict, Optional

from faleproxy.errors import FetchError, MissingURLError
from faleproxy.fetch import scraper
from faleproxy.fetch.base import BaseFetcher
from faleproxy.rewrite.rewriter import rewrite_html

logger = logging.getLogger(__name__)

async def process_fetch_request(url: Any, fetcher: Optional[BaseFetcher] = None) -> Dict[str, Any]:
    """
    Relay pipeline for one request.

    1. Reject a missing URL before any network work
    2. Fetch the remote document
    3. Rewrite visible text and title
    4. Return the response payload

    Every failure after validation surfaces as FetchError.
    """
    if url is None or url == "":
        raise MissingURLError()
    if not isinstance(url, str):
        raise FetchError(f"Invalid URL: {url!r}")

    fetcher = fetcher or scraper.HttpxFetcher()

    logger.info("Fetching %s", url)
    try:
        result = await fetcher.fetch(url)
    except FetchError as e:
        logger.error("Error fetching URL %s: %s", url, e.cause)
        raise

    try:
        rewritten = rewrite_html(result.html)
    except Exception as e:
        logger.exception("Error rewriting content from %s", url)
        raise FetchError(str(e)) from e

    logger.info(
        "Rewrote %s: %d replacement(s), %d characters",
        url, rewritten.replacements, len(rewritten.content),
    )

    return {
        "success": True,
        "content": rewritten.content,
        "title": rewritten.title,
        "originalUrl": url,
    }
