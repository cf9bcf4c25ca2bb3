"""
Search results fetcher.

Builds the lodgement-date search URL for the lookback window and fetches
the results page using the session established by SessionFetcher.
"""

from datetime import date
from typing import Tuple
from urllib.parse import quote

import aiohttp
from dateutil.relativedelta import relativedelta

from teatree_scraper.config import ScraperSettings, DEFAULT_SETTINGS
from teatree_scraper.fetchers.base import BaseFetcher
from teatree_scraper.utils.logging import get_logger

logger = get_logger()


def search_date_range(today: date, months: int = 1) -> Tuple[date, date]:
    """
    Compute the lodgement date range ending today.

    The start is clamped to the end of a shorter month, so 31 March
    searches from 28 (or 29) February.
    """
    return today - relativedelta(months=months), today


def format_portal_date(value: date) -> str:
    """Format a date as DD/MM/YYYY, percent-encoded for a query string."""
    return quote(value.strftime("%d/%m/%Y"), safe="")


def build_search_url(today: date, settings: ScraperSettings = DEFAULT_SETTINGS) -> str:
    """
    Build the search URL for applications lodged in the lookback window.

    Args:
        today: Last day of the search range
        settings: Scraper settings holding the URL template

    Returns:
        Complete, already-encoded search URL
    """
    date_from, date_to = search_date_range(today, settings.lookback_months)
    return (
        settings.search_url_template
        .replace("{0}", format_portal_date(date_from))
        .replace("{1}", format_portal_date(date_to))
    )


class SearchFetcher(BaseFetcher):
    """Fetcher for the development application search results page."""

    async def fetch_results(self, session: aiohttp.ClientSession, today: date) -> str:
        """
        Fetch the search results page.

        Args:
            session: aiohttp session already holding the portal session cookie
            today: Last day of the search range

        Returns:
            Raw HTML of the results page
        """
        url = build_search_url(today, self.settings)
        logger.info(f"Retrieving search results for: {url}")
        return await self.fetch_text(session, url)
