"""HTML parsers for Tea Tree Gully portal responses."""

from teatree_scraper.parsers.base import BaseParser
from teatree_scraper.parsers.application_parser import ApplicationParser

__all__ = [
    "BaseParser",
    "ApplicationParser",
]
