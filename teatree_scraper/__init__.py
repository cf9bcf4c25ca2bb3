"""Development application scraper for the City of Tea Tree Gully eService portal."""

__version__ = "0.1.0"
