"""
Portal session fetcher.

The search page only honours queries from a client that already holds the
session cookie set by the enquiry landing page.
"""

import aiohttp

from teatree_scraper.fetchers.base import BaseFetcher
from teatree_scraper.utils.logging import get_logger

logger = get_logger()


class SessionFetcher(BaseFetcher):
    """Fetcher for the portal landing page that issues the session cookie."""

    async def acquire_session(self, session: aiohttp.ClientSession) -> int:
        """
        Load the landing page so the session's cookie jar picks up the portal cookie.

        Args:
            session: aiohttp session with an empty cookie jar

        Returns:
            Number of cookies held by the jar afterwards
        """
        logger.info(f"Retrieving page: {self.settings.main_url}")
        await self.fetch_text(session, self.settings.main_url)

        cookie_count = len(session.cookie_jar)
        logger.debug(f"Cookie jar holds {cookie_count} cookie(s) after landing page")
        return cookie_count
