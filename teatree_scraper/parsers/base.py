"""
Base parser utilities for HTML parsing.

Provides common helper methods used across all parsers.
"""

import re
from datetime import date, datetime
from typing import Iterable, Optional

from bs4 import Tag

# Runs of two or more whitespace characters
_WHITESPACE_RUN = re.compile(r"\s\s+")


class BaseParser:
    """Base class with common parsing utilities."""

    @staticmethod
    def join_text(elements: Iterable[Tag]) -> str:
        """Concatenate the text of several elements and strip the result."""
        return "".join(element.get_text() for element in elements).strip()

    @staticmethod
    def collapse_whitespace(text: str) -> str:
        """Strip text and reduce each run of consecutive whitespace to one space."""
        return _WHITESPACE_RUN.sub(" ", text.strip())

    @staticmethod
    def parse_date(value: str, fmt: str = "%d/%m/%Y") -> Optional[date]:
        """
        Parse a date string, returning None when it does not match.

        strptime accepts one- or two-digit days and months for %d and %m.
        """
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            return None
