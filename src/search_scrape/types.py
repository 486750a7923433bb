"""
Common type definitions for search and scrape.

Immutable records passed between the extraction stages.
"""

from typing import NamedTuple


class SearchCandidate(NamedTuple):
    """A (title, url) pair parsed from a search result listing."""

    title: str
    url: str


class PageExtract(NamedTuple):
    """Title and bounded excerpt distilled from a fetched page."""

    page_title: str
    content: str


class WebSearchResult(NamedTuple):
    """Final search result handed back to callers."""

    title: str
    url: str
    content: str
