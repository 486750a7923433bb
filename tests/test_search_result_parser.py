"""
Tests for search result parsing.

Covers the primary result__a matcher, the absolute-link fallback, result
capping and exclusion of the search engine's own links.
"""

import pytest

from search_scrape.types import SearchCandidate
from search_scrape.web.search import SearchResultExtractor, build_search_url


def result_line(href: str, title: str) -> str:
    return f'<h2 class="result__title"><a rel="nofollow" class="result__a" href="{href}">{title}</a></h2>'


class TestPrimaryParsing:
    """Test cases for result__a line parsing."""

    @pytest.fixture
    def extractor(self):
        return SearchResultExtractor()

    def test_redirect_links_unwrapped(self, extractor):
        """Test that result links are unwrapped and paired with their titles."""
        markup = "\n".join(
            [
                "<html><body>",
                result_line(
                    "//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fone&amp;rut=abc",
                    "Example One",
                ),
                '<a class="result__snippet" href="#">Snippet text</a>',
                result_line(
                    "//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.org%2Ftwo&amp;rut=def",
                    "Example Two",
                ),
                "</body></html>",
            ]
        )

        results = extractor.extract(markup)

        assert results == [
            SearchCandidate(title="Example One", url="https://example.com/one"),
            SearchCandidate(title="Example Two", url="https://example.org/two"),
        ]

    def test_results_capped_in_document_order(self, extractor):
        """Test that only the first two results are returned, in order."""
        markup = "\n".join(
            result_line(f"https://site{i}.example.com/", f"Result number {i}")
            for i in range(5)
        )

        results = extractor.extract(markup)

        assert [r.url for r in results] == [
            "https://site0.example.com/",
            "https://site1.example.com/",
        ]

    def test_custom_max_results(self):
        """Test that max_results is respected."""
        extractor = SearchResultExtractor(max_results=3)
        markup = "\n".join(
            result_line(f"https://site{i}.example.com/", f"Result {i}") for i in range(5)
        )
        assert len(extractor.extract(markup)) == 3

    def test_inline_markup_stripped_from_title(self, extractor):
        """Test that bold highlighting and entities are removed from titles."""
        markup = result_line("https://example.com/", "Python <b>async</b> &amp; await")

        results = extractor.extract(markup)

        assert results[0].title == "Python async & await"

    def test_invalid_and_untitled_links_skipped(self, extractor):
        """Test that links without a valid URL or title are skipped."""
        markup = "\n".join(
            [
                result_line("javascript:void(0)", "Broken link"),
                result_line("https://example.com/empty", ""),
                result_line("https://example.com/good", "Good result"),
            ]
        )

        results = extractor.extract(markup)

        assert results == [
            SearchCandidate(title="Good result", url="https://example.com/good")
        ]

    def test_fallback_not_used_when_primary_matches(self, extractor):
        """Test that generic links are ignored once result__a links are found."""
        markup = "\n".join(
            [
                '<a href="https://other.example.com/">Some other link text</a>',
                result_line("https://example.com/real", "Real result"),
            ]
        )

        results = extractor.extract(markup)

        assert results == [
            SearchCandidate(title="Real result", url="https://example.com/real")
        ]


class TestFallbackParsing:
    """Test cases for the absolute-link fallback matcher."""

    @pytest.fixture
    def extractor(self):
        return SearchResultExtractor()

    def test_generic_links_used_without_result_links(self, extractor):
        """Test that absolute links are used when no result__a links exist."""
        markup = "\n".join(
            [
                '<a href="/relative/path">Relative link</a>',
                '<a href="https://example.com/first">  First Result  </a>',
                '<a href="https://example.org/second">Second Result</a>',
                '<a href="https://example.net/third">Third Result</a>',
            ]
        )

        results = extractor.extract(markup)

        assert results == [
            SearchCandidate(title="First Result", url="https://example.com/first"),
            SearchCandidate(title="Second Result", url="https://example.org/second"),
        ]

    def test_search_engine_links_excluded(self, extractor):
        """Test that the search engine's own navigation links are never returned."""
        markup = "\n".join(
            [
                '<a href="https://duckduckgo.com/about">About DuckDuckGo</a>',
                '<a href="https://html.duckduckgo.com/html/?q=next">Next page</a>',
                '<a href="https://duckduckgo.com/l/?uddg=https%3A%2F%2Fduckduckgo.com%2Fsettings">Settings</a>',
                '<a href="https://example.com/page">Example Page</a>',
            ]
        )

        results = extractor.extract(markup)

        assert results == [
            SearchCandidate(title="Example Page", url="https://example.com/page")
        ]
        assert all("duckduckgo.com" not in r.url for r in results)

    def test_url_used_as_title_without_text(self, extractor):
        """Test that the URL stands in for the title when no anchor text follows."""
        markup = '<link rel="canonical" href="https://example.com/canonical">'

        results = extractor.extract(markup)

        assert results == [
            SearchCandidate(
                title="https://example.com/canonical",
                url="https://example.com/canonical",
            )
        ]

    def test_empty_text_skipped(self, extractor):
        """Test that links with blank anchor text are skipped."""
        markup = "\n".join(
            [
                '<a href="https://example.com/icon"> </a>',
                '<a href="https://example.com/text">Readable title</a>',
            ]
        )

        results = extractor.extract(markup)

        assert [r.url for r in results] == ["https://example.com/text"]

    def test_no_links(self, extractor):
        """Test that markup without links yields no candidates."""
        assert extractor.extract("<html><body><p>No results.</p></body></html>") == []
        assert extractor.extract("") == []


class TestSearchUrl:
    """Test cases for search URL construction."""

    def test_query_percent_encoded(self):
        """Test that spaces and reserved characters are percent-encoded."""
        url = build_search_url("example topic & more?")
        assert url == "https://html.duckduckgo.com/html/?q=example%20topic%20%26%20more%3F"
