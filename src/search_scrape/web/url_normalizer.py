"""
URL normalization for search result links.

Cleans raw href values pulled out of search markup: unwraps DuckDuckGo
redirect links, infers missing schemes and validates the result.
"""

from urllib.parse import unquote, urlparse

from ..errors import ValidationFailure

DUCKDUCKGO_ORIGIN = "https://duckduckgo.com"
DUCKDUCKGO_DOMAIN = "duckduckgo.com"

# Outbound click wrappers that carry the real destination in ``uddg``
REDIRECT_PREFIXES = (
    "//duckduckgo.com/l/?",
    "https://duckduckgo.com/l/?",
    "http://duckduckgo.com/l/?",
    "/l/?",
)
REDIRECT_PARAM = "uddg="


def unwrap_redirect(url: str) -> str | None:
    """
    Extract the destination URL from a DuckDuckGo redirect link.

    Args:
        url: Trimmed href value

    Returns:
        The percent-decoded ``uddg`` value, or None if url is not a redirect
    """
    if not url.startswith(REDIRECT_PREFIXES):
        return None

    start = url.find(REDIRECT_PARAM)
    if start == -1:
        return None

    encoded, _, _ = url[start + len(REDIRECT_PARAM) :].partition("&")
    return unquote(encoded)


def normalize_url(raw: str, origin: str = DUCKDUCKGO_ORIGIN) -> str:
    """
    Clean a raw href value into an absolute URL where possible.

    Never fails: input that cannot be recovered is returned trimmed.

    Args:
        raw: The href value as found in markup
        origin: Origin used to resolve site-relative links

    Returns:
        Best-effort cleaned URL
    """
    url = raw.strip()

    unwrapped = unwrap_redirect(url)
    if unwrapped is not None:
        url = unwrapped

    if url.startswith("//"):
        url = "https:" + url
    elif url.startswith("/"):
        url = origin.rstrip("/") + url

    if not url.startswith(("http://", "https://")) and url.startswith("www."):
        url = "https://" + url

    return url


def is_valid_url(url: str) -> bool:
    """Check that url parses with an http or https scheme and a host."""
    try:
        parsed = urlparse(url)
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)
    except ValueError:
        return False


def require_valid_url(url: str) -> str:
    """Return url unchanged, raising ValidationFailure if it is not fetchable."""
    if not is_valid_url(url):
        raise ValidationFailure(url)
    return url


def is_search_engine_url(url: str, domain: str = DUCKDUCKGO_DOMAIN) -> bool:
    """
    Check whether a URL points at the search engine itself.

    Args:
        url: Absolute URL to check
        domain: The search engine's registrable domain

    Returns:
        True if the host is the domain or one of its subdomains
    """
    try:
        host = (urlparse(url).hostname or "").lower()
    except ValueError:
        return False

    domain = domain.lower()
    return host == domain or host.endswith("." + domain)
