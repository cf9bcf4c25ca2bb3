"""
Development application search results parser.

Each application on the results page is an ``h4.non_table_headers`` heading
holding the address, followed by a ``div`` of ``p.rowDataOnly`` rows that
pair a ``span.key`` label with a ``span.inputField`` value.
"""

import re
from datetime import date
from typing import Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from teatree_scraper.config import ScraperSettings, DEFAULT_SETTINGS
from teatree_scraper.models import DevelopmentApplication
from teatree_scraper.parsers.base import BaseParser
from teatree_scraper.utils.logging import get_logger

logger = get_logger()

# Labels mapped onto record fields
REASON_LABEL = "Type of Work"
APPLICATION_NUMBER_LABEL = "Application No."
DATE_LODGED_LABEL = "Date Lodged"

STATE_TOKEN = " SA "
SUFFIX_SEPARATOR = " - "

# D/MM/YYYY where the leading zero of the day (and month) may be omitted
_LODGED_DATE = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")


class ApplicationParser(BaseParser):
    """Parser for the development application search results page."""

    def __init__(self, settings: ScraperSettings = DEFAULT_SETTINGS):
        self.settings = settings

    def parse(self, html: str, scrape_date: date) -> Iterator[DevelopmentApplication]:
        """
        Parse development applications from the search results.

        Headings without both an application number and an address are
        skipped without error.

        Args:
            html: Raw HTML of the search results page
            scrape_date: Date of this run

        Yields:
            DevelopmentApplication records in document order
        """
        soup = BeautifulSoup(html, 'html.parser')

        for heading in self.find_headings(soup):
            application = self._parse_heading(heading, scrape_date)
            if application is None:
                continue
            yield application

    def find_headings(self, soup: BeautifulSoup) -> List[Tag]:
        """Find the address heading of every application, in document order."""
        return soup.select("h4.non_table_headers")

    def iter_fields(self, heading: Tag) -> Iterator[Tuple[str, str]]:
        """Yield (label, value) pairs from the block that follows a heading."""
        for block in self._following_blocks(heading):
            for row in block.find_all("p", class_="rowDataOnly"):
                key = self.join_text(row.find_all("span", class_="key", recursive=False))
                value = self.join_text(row.find_all("span", class_="inputField", recursive=False))
                yield key, value

    @staticmethod
    def _following_blocks(heading: Tag) -> List[Tag]:
        """Return the heading's next sibling element when it is a div."""
        sibling = heading.find_next_sibling()
        if sibling is not None and sibling.name == "div":
            return [sibling]
        return []

    def _parse_heading(self, heading: Tag, scrape_date: date) -> Optional[DevelopmentApplication]:
        """Build a record from a single heading and its field block."""
        address = self.clean_address(heading.get_text())

        application_number = ""
        reason = ""
        received_date: Optional[date] = None

        # Later rows overwrite earlier ones for the same label
        for key, value in self.iter_fields(heading):
            if key == REASON_LABEL:
                reason = value
            elif key == APPLICATION_NUMBER_LABEL:
                application_number = value
            elif key == DATE_LODGED_LABEL:
                received_date = self.parse_lodged_date(value)

        application = DevelopmentApplication(
            application_number=application_number,
            address=address,
            reason=reason,
            information_url=self.settings.main_url,
            comment_url=self.settings.comment_url,
            scrape_date=scrape_date.isoformat(),
            received_date=received_date.isoformat() if received_date else "",
        )
        if not application.is_valid():
            logger.debug(f"Skipping heading without application number or address: {address!r}")
            return None
        return application

    @classmethod
    def clean_address(cls, text: str) -> str:
        """Normalise heading text into an address without its trailing suffix."""
        return cls.strip_address_suffix(cls.normalize_address(text))

    @classmethod
    def normalize_address(cls, text: str) -> str:
        """Trim the address and collapse runs of whitespace into single spaces."""
        return cls.collapse_whitespace(text)

    @staticmethod
    def strip_address_suffix(address: str) -> str:
        """
        Remove a suffix such as " - Building Rules Application".

        The search for the dash starts at the state abbreviation so that a
        hyphenated house number ("12-14 Main Road") is left intact.
        """
        state_index = address.find(STATE_TOKEN)
        if state_index < 0:
            return address

        suffix_index = address.find(SUFFIX_SEPARATOR, state_index)
        if suffix_index < 0:
            return address
        return address[:suffix_index]

    @classmethod
    def parse_lodged_date(cls, value: str) -> Optional[date]:
        """Parse a lodged date such as "5/03/2019", returning None when invalid."""
        if not _LODGED_DATE.match(value):
            return None
        return cls.parse_date(value)
