"""Data models for the Tea Tree Gully scraper."""

from teatree_scraper.models.application import DevelopmentApplication

__all__ = [
    "DevelopmentApplication",
]
