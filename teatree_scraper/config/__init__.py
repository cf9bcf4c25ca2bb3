"""Configuration module for the Tea Tree Gully scraper."""

from teatree_scraper.config.settings import ScraperSettings, DEFAULT_SETTINGS

__all__ = [
    "ScraperSettings",
    "DEFAULT_SETTINGS",
]
