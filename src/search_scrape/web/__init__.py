from search_scrape.web.content_extractor import ContentExtractor, should_include_text
from search_scrape.web.content_fetcher import Fetcher, WebContentFetcher

__all__ = ["ContentExtractor", "Fetcher", "WebContentFetcher", "should_include_text"]
