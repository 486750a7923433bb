import logging
from urllib.parse import quote

from ...errors import TransportFailure
from ..content_fetcher import Fetcher

logger = logging.getLogger("search_scrape.search")

DUCKDUCKGO_HTML_ENDPOINT = "https://html.duckduckgo.com/html/"


def build_search_url(query: str, endpoint: str = DUCKDUCKGO_HTML_ENDPOINT) -> str:
    """Build the HTML endpoint URL for a query, percent-encoding reserved characters."""
    return f"{endpoint}?q={quote(query, safe='')}"


async def fetch_search_page(
    fetcher: Fetcher,
    query: str,
    headers: dict[str, str],
    *,
    endpoint: str = DUCKDUCKGO_HTML_ENDPOINT,
    timeout: float | None = None,
) -> str:
    """
    Fetch the raw HTML result listing for a query.

    Args:
        fetcher: Fetch capability used for the request
        query: The search query string
        headers: Request headers, at least a browser-like User-Agent

    Returns:
        Response body decoded as UTF-8 (undecodable bytes replaced)

    Raises:
        TransportFailure: If the request cannot be completed
    """
    url = build_search_url(query, endpoint)
    logger.info(f"🔍 Searching: {url}")

    try:
        status, body = await fetcher.fetch(url, headers, timeout)
    except TransportFailure:
        logger.warning(f"❌ Search request failed for query '{query}'")
        raise

    if not 200 <= status < 300:
        # Non-2xx listings are still parsed; they simply yield no candidates
        logger.warning(f"⚠️ Search endpoint returned HTTP {status} for '{query}'")

    return body.decode("utf-8", errors="replace")
