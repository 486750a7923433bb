"""
Search Package

Builds DuckDuckGo HTML search requests and parses the result listing.
"""

from search_scrape.web.search.duckduckgo import build_search_url, fetch_search_page
from search_scrape.web.search.result_parser import SearchResultExtractor

__all__ = ["build_search_url", "fetch_search_page", "SearchResultExtractor"]
