#!/usr/bin/env python3
"""
Development application scraper for the City of Tea Tree Gully eService portal.

Usage:
    python main.py [options]

Examples:
    python main.py
    python main.py --database data.sqlite -v
"""

import argparse
import asyncio
import sys
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from teatree_scraper.config import ScraperSettings, DEFAULT_SETTINGS
from teatree_scraper.errors import ScraperError
from teatree_scraper.fetchers import BaseFetcher, SearchFetcher, SessionFetcher
from teatree_scraper.parsers import ApplicationParser
from teatree_scraper.storage import ApplicationDatabase
from teatree_scraper.utils.logging import setup_logging, get_logger

# Rich console for phase headers
console = Console()

logger = get_logger()


@dataclass
class ScrapeSummary:
    """Counts reported at the end of a run."""

    found: int = 0
    inserted: int = 0
    skipped: int = 0


class TeaTreeGullyScraper:
    """Retrieves recent development applications and stores the new ones."""

    def __init__(self, settings: ScraperSettings = DEFAULT_SETTINGS):
        self.settings = settings
        self.session_fetcher = SessionFetcher(settings)
        self.search_fetcher = SearchFetcher(settings)
        self.parser = ApplicationParser(settings)

    async def fetch_search_results(self, today: date) -> str:
        """Acquire a portal session, then fetch the search results with it.

        The search must reuse the cookie jar filled by the landing page; the
        portal returns no results to a client without its session cookie.
        """
        async with BaseFetcher.create_session() as session:
            await self.session_fetcher.acquire_session(session)
            return await self.search_fetcher.fetch_results(session, today)

    async def run(self, today: Optional[date] = None) -> ScrapeSummary:
        """Run the scrape: session, search, parse, store.

        Transport and storage failures propagate; rows inserted before the
        failure stay committed.
        """
        today = today or date.today()
        summary = ScrapeSummary()

        with ApplicationDatabase(self.settings.database_path) as database:
            database.ensure_schema()

            console.rule("[bold cyan]Retrieving Search Results")
            html = await self.fetch_search_results(today)

            console.rule("[bold green]Storing Development Applications")
            for application in self.parser.parse(html, today):
                summary.found += 1
                if database.insert_if_absent(application):
                    summary.inserted += 1
                else:
                    summary.skipped += 1

            logger.info(
                f"Found {summary.found} application(s): {summary.inserted} inserted, "
                f"{summary.skipped} skipped. Database holds {database.count()} row(s)."
            )

        return summary


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scrape Tea Tree Gully development applications lodged in the last month",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py
  python main.py --database data.sqlite -v
        """
    )

    parser.add_argument("--database", default=DEFAULT_SETTINGS.database_path,
                        help=f"SQLite database file (default: {DEFAULT_SETTINGS.database_path})")
    parser.add_argument("--log-file", type=Path, help="Also write debug-level logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging (debug level)")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, verbose=args.verbose)

    settings = replace(DEFAULT_SETTINGS, database_path=args.database)
    scraper = TeaTreeGullyScraper(settings)

    try:
        asyncio.run(scraper.run())
    except ScraperError as e:
        logger.error(f"[{e.error_code}] {e}")
        return 1

    logger.info("Complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
