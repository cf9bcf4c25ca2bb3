"""Async HTTP fetchers for the Tea Tree Gully eService portal."""

from teatree_scraper.fetchers.base import BaseFetcher
from teatree_scraper.fetchers.session_fetcher import SessionFetcher
from teatree_scraper.fetchers.search_fetcher import (
    SearchFetcher,
    build_search_url,
    format_portal_date,
    search_date_range,
)

__all__ = [
    # Base
    "BaseFetcher",
    # Session
    "SessionFetcher",
    # Search
    "SearchFetcher",
    "build_search_url",
    "format_portal_date",
    "search_date_range",
]
