"""
Search Result Parsing

Line-oriented matcher for DuckDuckGo's HTML result page. This is a
compatibility shim tied to that page's layout (one result link per line),
not a general HTML parsing strategy. Two tiers:

1. Primary: lines carrying the ``result__a`` link class.
2. Fallback: any line with an absolute href, used only when the primary
   tier finds nothing. Links back to the search engine are skipped.
"""

import html
import logging
import re

from ...types import SearchCandidate
from ..url_normalizer import (
    DUCKDUCKGO_DOMAIN,
    DUCKDUCKGO_ORIGIN,
    is_search_engine_url,
    is_valid_url,
    normalize_url,
)

logger = logging.getLogger("search_scrape.search")

RESULT_LINK_MARKER = "result__a"

HREF_PATTERN = re.compile(r'href="(?P<href>[^"]*)"')
# Anchor text from the first ">" after the href up to the closing tag
ANCHOR_TEXT_PATTERN = re.compile(r">(?P<text>.*?)</a>")
# Text from the first ">" after the href up to the next tag of any kind
GENERIC_TEXT_PATTERN = re.compile(r">(?P<text>[^<]*)<")
TAG_PATTERN = re.compile(r"<[^>]*>")


def clean_title(raw: str) -> str:
    """Strip inline tags and entities from anchor text."""
    text = html.unescape(TAG_PATTERN.sub("", raw))
    return " ".join(text.split())


class SearchResultExtractor:
    """Extracts ranked (title, url) candidates from search result markup."""

    def __init__(
        self,
        max_results: int = 2,
        origin: str = DUCKDUCKGO_ORIGIN,
        search_domain: str = DUCKDUCKGO_DOMAIN,
    ):
        self.max_results = max_results
        self.origin = origin
        self.search_domain = search_domain

    def extract(self, markup: str) -> list[SearchCandidate]:
        """
        Extract search candidates in the order they appear.

        Args:
            markup: Raw HTML of the search result page

        Returns:
            Up to max_results candidates
        """
        lines = markup.splitlines()

        results = self._parse_results(lines)
        if not results:
            logger.debug("No primary result links found, trying fallback parsing")
            results = self._parse_alternative_results(lines)

        return results

    def _parse_results(self, lines: list[str]) -> list[SearchCandidate]:
        results: list[SearchCandidate] = []
        for line in lines:
            if RESULT_LINK_MARKER in line and "href=" in line:
                candidate = self._parse_result_line(line)
                if candidate is not None:
                    results.append(candidate)
                    if len(results) >= self.max_results:
                        break
        return results

    def _parse_result_line(self, line: str) -> SearchCandidate | None:
        href_match = HREF_PATTERN.search(line)
        if href_match is None:
            return None

        text_match = ANCHOR_TEXT_PATTERN.search(line, href_match.end())
        if text_match is None:
            return None

        url = normalize_url(html.unescape(href_match["href"]), self.origin)
        title = clean_title(text_match["text"])

        if url and title and is_valid_url(url):
            return SearchCandidate(title=title, url=url)
        return None

    def _parse_alternative_results(self, lines: list[str]) -> list[SearchCandidate]:
        results: list[SearchCandidate] = []
        for line in lines:
            if "href=" in line and ("http://" in line or "https://" in line):
                candidate = self._parse_any_link_line(line)
                if candidate is not None:
                    results.append(candidate)
                    if len(results) >= self.max_results:
                        break
        return results

    def _parse_any_link_line(self, line: str) -> SearchCandidate | None:
        href_match = HREF_PATTERN.search(line)
        if href_match is None:
            return None

        href = html.unescape(href_match["href"])
        if not href.startswith(("http://", "https://")):
            return None

        url = normalize_url(href, self.origin)

        text_match = GENERIC_TEXT_PATTERN.search(line, href_match.end())
        title = clean_title(text_match["text"]) if text_match else url

        if (
            title
            and is_valid_url(url)
            and not is_search_engine_url(url, self.search_domain)
        ):
            return SearchCandidate(title=title, url=url)
        return None
