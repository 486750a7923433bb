"""
Error types for search and scrape operations.

These never reach callers of search_and_scrape; they travel between the
fetch, parse and orchestration layers and end up in the logs.
"""


class SearchScrapeError(Exception):
    """Base class for search and scrape failures."""


class TransportFailure(SearchScrapeError):
    """Raised when a request fails at the network level (DNS, connect, TLS, timeout)."""


class HTTPStatusFailure(SearchScrapeError):
    """Raised when a page responds with a non-success status code."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} for {url}")


class ParseFailure(SearchScrapeError):
    """Raised when page markup cannot be parsed or queried."""


class ValidationFailure(SearchScrapeError):
    """Raised for malformed or disallowed URLs."""

    def __init__(self, url: str, reason: str = "Must be an http:// or https:// URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")
