"""
Base fetcher utilities for async HTTP operations.

Provides the shared request pattern used by the session and search fetchers.
Failures are never retried; they surface as TransportError.
"""

import asyncio
from typing import Dict

import aiohttp
from yarl import URL

from teatree_scraper.config import ScraperSettings, DEFAULT_SETTINGS
from teatree_scraper.errors import TransportError
from teatree_scraper.utils.logging import get_logger

logger = get_logger()


class BaseFetcher:
    """Base class for async HTTP fetchers."""

    def __init__(self, settings: ScraperSettings = DEFAULT_SETTINGS):
        """
        Initialize fetcher with scraper settings.

        Args:
            settings: Portal URLs and transport settings
        """
        self.settings = settings
        self.timeout = aiohttp.ClientTimeout(total=settings.request_timeout)

    def get_headers(self) -> Dict[str, str]:
        """Get default HTTP headers."""
        return {
            "Referer": self.settings.main_url,
            "User-Agent": self.settings.user_agent,
        }

    async def fetch_text(self, session: aiohttp.ClientSession, url: str) -> str:
        """
        Fetch a URL and return the response body.

        The URL is sent as-is: its query string is already percent-encoded.
        Undecodable bytes in the body are replaced rather than failing the run.

        Args:
            session: aiohttp session whose cookie jar carries the portal session
            url: URL to fetch

        Returns:
            Response text

        Raises:
            TransportError: on network failure or a non-success status
        """
        logger.debug(f"GET {url}")
        try:
            async with session.get(
                URL(url, encoded=True),
                headers=self.get_headers(),
                timeout=self.timeout
            ) as resp:
                if not 200 <= resp.status < 300:
                    raise TransportError(
                        f"Request to {url} failed with status {resp.status}",
                        url=url,
                        status=resp.status,
                    )
                return await resp.text(errors="replace")

        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {url} timed out", url=url) from e

        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e

    @staticmethod
    def create_session() -> aiohttp.ClientSession:
        """Create a client session with a fresh, empty cookie jar."""
        return aiohttp.ClientSession(cookie_jar=aiohttp.CookieJar())
