"""
Search and Scrape Orchestration

Runs a query against DuckDuckGo, then fetches and distills each candidate
page in turn. Every failure degrades to an omitted result; callers always
get a list back.
"""

import asyncio
import logging
import time
import uuid

from .errors import HTTPStatusFailure, SearchScrapeError, TransportFailure
from .logger import LOGGER_NAME, setup_logging
from .settings import Settings, get_settings
from .types import PageExtract, SearchCandidate, WebSearchResult
from .web.content_extractor import ContentExtractor
from .web.content_fetcher import Fetcher, WebContentFetcher
from .web.search import SearchResultExtractor, fetch_search_page


class WebSearchService:
    """
    Sequential search-and-scrape pipeline.

    Page fetches never overlap within one call, and every fetch after the
    first waits ``request_delay`` seconds on the same task.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        fetcher: Fetcher | None = None,
    ):
        self.settings = settings or get_settings()
        self.fetcher = fetcher or WebContentFetcher(
            timeout=self.settings.search_timeout
        )

        # Set up logging
        self.search_logger = setup_logging(self.settings)

        self.search_extractor = SearchResultExtractor(
            max_results=self.settings.max_results,
            origin=self.settings.search_origin,
            search_domain=self.settings.search_domain,
        )
        self.content_extractor = ContentExtractor(
            max_length=self.settings.max_excerpt_length,
            extended_content_threshold=self.settings.extended_content_threshold,
            header_content_threshold=self.settings.header_content_threshold,
            min_text_length=self.settings.min_text_length,
            min_header_length=self.settings.min_header_length,
        )

    async def search_and_scrape(self, query: str) -> list[WebSearchResult]:
        """
        Search for a query and scrape the top result pages.

        Args:
            query: Natural-language search query

        Returns:
            Between 0 and max_results scraped results, in search rank order
        """
        search_id = uuid.uuid4().hex[:8]
        search_start = time.time()
        self.search_logger.info(f"🚀 [{search_id}] Starting web search for: {query}")

        try:
            candidates = await self.perform_search(query)
        except SearchScrapeError as e:
            self.search_logger.error(f"❌ [{search_id}] Web search error: {e}")
            return []
        except Exception as e:
            self.search_logger.error(
                f"❌ [{search_id}] Unexpected web search error: {e}"
            )
            return []

        self.search_logger.info(
            f"📋 [{search_id}] Found {len(candidates)} candidate(s) for '{query}'"
        )

        web_results: list[WebSearchResult] = []
        for index, candidate in enumerate(candidates):
            if index > 0:
                await asyncio.sleep(self.settings.request_delay)

            page = await self.scrape_website(candidate.url)
            if page is None:
                continue

            web_results.append(
                WebSearchResult(
                    title=page.page_title or candidate.title,
                    url=candidate.url,
                    content=page.content,
                )
            )

        total_time = time.time() - search_start
        self.search_logger.info(
            f"✅ [{search_id}] Scraped {len(web_results)}/{len(candidates)} page(s) in {total_time:.2f} seconds"
        )
        return web_results

    async def perform_search(self, query: str) -> list[SearchCandidate]:
        """
        Fetch the search listing and extract ranked candidates.

        Raises:
            TransportFailure: If the search request fails
        """
        markup = await fetch_search_page(
            self.fetcher,
            query,
            self.settings.search_headers,
            endpoint=self.settings.search_endpoint,
        )
        return self.search_extractor.extract(markup)

    async def scrape_website(self, url: str) -> PageExtract | None:
        """
        Fetch a page and extract its title and excerpt.

        Args:
            url: Candidate page URL

        Returns:
            The page extract, or None if the page could not be fetched
        """
        try:
            status, body = await self.fetcher.fetch(
                url, self.settings.page_headers, self.settings.page_timeout
            )
            if not 200 <= status < 300:
                raise HTTPStatusFailure(url, status)
        except TransportFailure as e:
            self.search_logger.warning(f"❌ Scraping error for {url}: {e}")
            return None
        except SearchScrapeError as e:
            self.search_logger.warning(f"⏭️ Skipping {url}: {e}")
            return None
        except Exception as e:
            self.search_logger.warning(f"❌ Unexpected error fetching {url}: {e}")
            return None

        page = self.content_extractor.extract_from_html(body)
        self.search_logger.info(
            f"📄 Extracted {len(page.content)} chars from {url}"
        )
        return page


async def search_and_scrape(query: str) -> list[WebSearchResult]:
    """Search and scrape with default settings."""
    try:
        service = WebSearchService()
    except Exception as e:
        # Bad SEARCH_SCRAPE_* values or an unusable logging setup
        logging.getLogger(LOGGER_NAME).error(f"❌ Web search unavailable: {e}")
        return []
    return await service.search_and_scrape(query)
