"""
Web Content Extraction

Distills a parsed page into a title and a bounded text excerpt. Element
groups are consulted from most to least reliable, and the noisier groups
are only read while the excerpt is still short.
"""

import logging
from collections.abc import Callable, Iterable

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from ..errors import ParseFailure
from ..types import PageExtract

logger = logging.getLogger("search_scrape.web")

PARSE_FAILED = PageExtract(page_title="", content="Failed to parse content")

TRUNCATION_MARKER = "..."

# Elements stripped before any text is collected
NOISE_SELECTORS = [
    "script",
    "style",
    "nav",
    "header",
    "footer",
    '[class*="advertisement"]',
    '[class*="ad"]',
    '[class*="cookie"]',
    '[class*="popup"]',
]

ARTICLE_SELECTOR = "article"
CONTENT_CONTAINER_SELECTOR = '[class*="content"], [class*="main"], [class*="body"]'
HEADER_SELECTOR = "h1, h2, h3, h4, h5, h6"

# Boilerplate phrases that disqualify a text block
UNWANTED_KEYWORDS = [
    "cookie",
    "javascript",
    "advertisement",
    "subscribe",
    "newsletter",
    "privacy policy",
    "terms of service",
    "follow us",
    "share this",
]


def element_text(element: Tag) -> str:
    """Visible text of an element with whitespace runs collapsed."""
    return " ".join(element.get_text(" ").split())


def should_include_text(text: str, min_length: int = 21) -> bool:
    """
    Decide whether a text block is substantive enough to keep.

    Args:
        text: Candidate text block
        min_length: Shortest acceptable text

    Returns:
        False for short snippets and boilerplate, True otherwise
    """
    if len(text) < min_length:
        return False

    lowercase_text = text.lower()
    return not any(keyword in lowercase_text for keyword in UNWANTED_KEYWORDS)


class ContentExtractor:
    """Builds a PageExtract from page markup using tiered selector fallback."""

    def __init__(
        self,
        max_length: int = 800,
        extended_content_threshold: int = 500,
        header_content_threshold: int = 300,
        min_text_length: int = 21,
        min_header_length: int = 5,
    ):
        self.max_length = max_length
        self.extended_content_threshold = extended_content_threshold
        self.header_content_threshold = header_content_threshold
        self.min_text_length = min_text_length
        self.min_header_length = min_header_length

    def parse(self, data: bytes | str) -> BeautifulSoup:
        """Parse raw page markup into a document."""
        return BeautifulSoup(data, "html.parser")

    def extract_from_html(self, data: bytes | str) -> PageExtract:
        """Parse markup and extract it; never raises."""
        try:
            document = self.parse(data)
        except Exception as e:
            logger.warning(f"❌ Could not parse page markup: {e}")
            return PARSE_FAILED
        return self.extract(document)

    def extract(self, document: BeautifulSoup) -> PageExtract:
        """
        Extract the page title and a content excerpt.

        The document is modified in place: noise elements are removed.

        Args:
            document: Parsed page

        Returns:
            PageExtract with trimmed title and content, or the
            "Failed to parse content" sentinel if extraction breaks
        """
        try:
            return self._extract(document)
        except Exception as e:
            logger.warning(f"❌ Content extraction failed: {e}")
            return PARSE_FAILED

    def _extract(self, document: BeautifulSoup) -> PageExtract:
        page_title = self._extract_title(document)

        self._remove_noise_elements(document)

        buffer = ""

        buffer = self._collect(buffer, self._select(document, "p"))

        if len(buffer) < self.extended_content_threshold:
            buffer = self._collect(buffer, self._select(document, ARTICLE_SELECTOR))

        if len(buffer) < self.extended_content_threshold:
            buffer = self._collect(
                buffer, self._select(document, CONTENT_CONTAINER_SELECTOR)
            )

        if len(buffer) < self.header_content_threshold:
            buffer = self._collect(
                buffer,
                self._select(document, HEADER_SELECTOR),
                accept=lambda text: len(text) > self.min_header_length,
            )

        if len(buffer) > self.max_length:
            cut = max(self.max_length - len(TRUNCATION_MARKER), 0)
            buffer = buffer[:cut] + TRUNCATION_MARKER

        return PageExtract(page_title=page_title.strip(), content=buffer.strip())

    def _extract_title(self, document: BeautifulSoup) -> str:
        title_tag = document.find("title")
        return element_text(title_tag) if isinstance(title_tag, Tag) else ""

    def _select(self, document: BeautifulSoup, selector: str) -> list[Tag]:
        try:
            return document.select(selector)
        except SelectorSyntaxError as e:
            raise ParseFailure(f"Bad selector {selector!r}: {e}") from e

    def _remove_noise_elements(self, document: BeautifulSoup) -> None:
        for selector in NOISE_SELECTORS:
            for element in self._select(document, selector):
                # Nested matches go away with their ancestor
                if not element.decomposed:
                    element.decompose()

    def _collect(
        self,
        buffer: str,
        elements: Iterable[Tag],
        accept: Callable[[str], bool] | None = None,
    ) -> str:
        """Append qualifying element text until the buffer is full."""
        for element in elements:
            text = element_text(element)
            if not should_include_text(text, self.min_text_length):
                continue
            if accept is not None and not accept(text):
                continue

            buffer += text + " "
            if len(buffer) >= self.max_length:
                break
        return buffer
