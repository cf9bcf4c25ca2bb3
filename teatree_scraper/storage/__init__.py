"""Storage modules for the Tea Tree Gully scraper."""

from teatree_scraper.storage.database import ApplicationDatabase

__all__ = [
    "ApplicationDatabase",
]
