"""
Search and Scrape Settings

Centralized configuration using Pydantic Settings for type safety and validation.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Search and scrape settings with validation and type safety."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="SEARCH_SCRAPE_", extra="ignore"
    )

    # Search engine settings
    search_endpoint: str = "https://html.duckduckgo.com/html/"
    search_origin: str = "https://duckduckgo.com"
    search_domain: str = "duckduckgo.com"

    # Request headers
    user_agent: str = DEFAULT_USER_AGENT
    page_accept: str = (
        "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    )

    # Extraction limits
    max_results: int = Field(default=2, ge=1)
    max_excerpt_length: int = Field(default=800, ge=10)
    extended_content_threshold: int = 500
    header_content_threshold: int = 300
    min_text_length: int = 21
    # Headers must be longer than this. Has no effect while it is below
    # min_text_length, which every header already has to meet.
    min_header_length: int = 5

    # Pacing and timeouts (seconds)
    request_delay: float = Field(default=0.5, ge=0.0)
    page_timeout: float = Field(default=15.0, gt=0.0)
    search_timeout: float = Field(default=5.0, gt=0.0)

    # Logging. No log file is written unless log_dir is set.
    log_dir: str | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @property
    def page_headers(self) -> dict[str, str]:
        """Headers sent with every page fetch."""
        return {"User-Agent": self.user_agent, "Accept": self.page_accept}

    @property
    def search_headers(self) -> dict[str, str]:
        """Headers sent with the search request."""
        return {"User-Agent": self.user_agent}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
