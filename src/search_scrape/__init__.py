"""
Search and Scrape Package

Query-driven web discovery: finds a couple of relevant pages through
DuckDuckGo's HTML endpoint and distills each into a short excerpt for use
as language model grounding context.
"""

from search_scrape.logger import setup_logging
from search_scrape.service import WebSearchService, search_and_scrape
from search_scrape.settings import Settings, get_settings
from search_scrape.types import PageExtract, SearchCandidate, WebSearchResult

__version__ = "1.0.0"
__all__ = [
    "PageExtract",
    "SearchCandidate",
    "Settings",
    "WebSearchResult",
    "WebSearchService",
    "get_settings",
    "search_and_scrape",
    "setup_logging",
]
