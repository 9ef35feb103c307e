"""
Feed retrieval.

Fetches a feed document over HTTP(S) and parses it into the unified model.
"""

from urllib.parse import urlsplit

import httpx

from .config import FeederSettings
from .config import settings as default_settings
from .exceptions import InvalidScheme, TransportError
from .logging_config import get_logger
from .models import Feed
from .parser import parse_feed

logger = get_logger(__name__)

_SCHEMES = ("http", "https")


def check_scheme(url: str) -> str:
    """
    Validate that ``url`` uses http or https.

    Returns:
        The lower-cased scheme.

    Raises:
        InvalidScheme: If the scheme is missing or unsupported.
    """
    scheme = urlsplit(url).scheme.lower()
    if scheme not in _SCHEMES:
        raise InvalidScheme("Url must specify protocol.")
    return scheme


async def fetch_xml(
    url: str,
    settings: FeederSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """
    Fetch the complete body of a feed document.

    Args:
        url: Feed URL, must start with http or https.
        settings: Optional settings, defaults to the global instance.
        transport: Optional httpx transport.

    Returns:
        Response body as text.

    Raises:
        InvalidScheme: If the URL has no http/https scheme.
        TransportError: If the request fails.
    """
    check_scheme(url)
    settings = settings or default_settings

    async with httpx.AsyncClient(
        timeout=settings.fetch_timeout_seconds,
        follow_redirects=settings.follow_redirects,
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    ) as client:
        logger.info("Fetching feed", extra={"url": url})
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Feed fetch failed", extra={"url": url, "error": str(e)})
            raise TransportError(f"Failed to fetch feed: {e}") from e

    logger.debug("Fetched feed", extra={"url": url, "bytes": len(response.content)})
    return response.text


async def get_feed(
    url: str,
    settings: FeederSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Feed:
    """
    Fetch and parse a feed.

    Args:
        url: Feed URL.
        settings: Optional settings, defaults to the global instance.
        transport: Optional httpx transport.

    Returns:
        Parsed feed.

    Raises:
        FeederError: On any fetch or parse failure.
    """
    content = await fetch_xml(url, settings=settings, transport=transport)
    return parse_feed(content)
