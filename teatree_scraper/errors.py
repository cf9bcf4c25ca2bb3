"""Scraper errors and failure typing."""

from typing import Optional


class ScraperError(Exception):
    """Base class for scraper failures."""

    error_code = "SCRAPER_ERROR"


class TransportError(ScraperError):
    """Raised when a portal request fails or returns a non-success status."""

    error_code = "TRANSPORT_ERROR"

    def __init__(self, message: str, url: str, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status


class StorageError(ScraperError):
    """Raised when the database rejects a schema or insert statement."""

    error_code = "STORAGE_ERROR"
