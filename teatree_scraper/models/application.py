"""
Development application data model.

One record per application listed on the portal's search results page.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DevelopmentApplication:
    """
    A development application extracted from the search results.

    Both ``application_number`` and ``address`` must be non-empty for the
    record to be stored; the remaining fields may be empty.
    """

    application_number: str
    address: str
    reason: str = ""
    information_url: str = ""
    comment_url: str = ""
    scrape_date: str = ""
    received_date: str = ""  # ISO date, or "" when the lodged date was unparseable

    def is_valid(self) -> bool:
        """Check that the key fields are present."""
        return self.application_number != "" and self.address != ""

    def to_row(self) -> tuple:
        """Convert to a row in the persisted column order."""
        return (
            self.application_number,
            self.address,
            self.reason,
            self.information_url,
            self.comment_url,
            self.scrape_date,
            self.received_date,
            None,  # on_notice_from
            None,  # on_notice_to
        )

    def describe(self) -> str:
        return (
            f'application "{self.application_number}" with address "{self.address}" '
            f'and reason "{self.reason}"'
        )
