"""
SQLite storage for development applications.

Applications are keyed by council reference and only ever inserted; an
application already present is reported as skipped.
"""

import sqlite3
from pathlib import Path
from typing import Optional, Union

from teatree_scraper.errors import StorageError
from teatree_scraper.models import DevelopmentApplication
from teatree_scraper.utils.logging import get_logger

logger = get_logger()

CREATE_TABLE_SQL = (
    "create table if not exists [data] ("
    "[council_reference] text primary key, "
    "[address] text, "
    "[description] text, "
    "[info_url] text, "
    "[comment_url] text, "
    "[date_scraped] text, "
    "[date_received] text, "
    "[on_notice_from] text, "
    "[on_notice_to] text)"
)

INSERT_SQL = "insert or ignore into [data] values (?, ?, ?, ?, ?, ?, ?, ?, ?)"


class ApplicationDatabase:
    """Owns the single SQLite connection used for one scraper run."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the database wrapper.

        Args:
            path: SQLite database file; created on first connect
        """
        self.path = Path(path)
        self._conn: Optional[sqlite3.Connection] = None

    def __enter__(self) -> "ApplicationDatabase":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def connect(self) -> None:
        """Open the connection."""
        try:
            self._conn = sqlite3.connect(self.path)
        except sqlite3.Error as e:
            logger.error(f"Failed to open database {self.path}: {e}")
            raise StorageError(f"Failed to open database {self.path}") from e

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError(f"Database {self.path} is not open")
        return self._conn

    def ensure_schema(self) -> None:
        """Create the applications table if it does not already exist."""
        try:
            with self.connection:
                self.connection.execute(CREATE_TABLE_SQL)
        except sqlite3.Error as e:
            logger.error(f"Failed to create schema in {self.path}: {e}")
            raise StorageError("Failed to create the data table") from e

    def insert_if_absent(self, application: DevelopmentApplication) -> bool:
        """
        Insert an application unless its council reference is already stored.

        Each insert is committed on its own.

        Returns:
            True if a row was inserted, False if it was skipped
        """
        try:
            with self.connection:
                cursor = self.connection.execute(INSERT_SQL, application.to_row())
        except sqlite3.Error as e:
            logger.error(f"Failed to insert {application.describe()}: {e}")
            raise StorageError(
                f"Failed to insert application {application.application_number}"
            ) from e

        inserted = cursor.rowcount > 0
        if inserted:
            logger.info(f"    Inserted: {application.describe()} into the database.")
        else:
            logger.info(
                f"    Skipped: {application.describe()} because it was already present in the database."
            )
        return inserted

    def count(self) -> int:
        """Return the number of stored applications."""
        try:
            row = self.connection.execute("select count(*) from [data]").fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to count rows in {self.path}: {e}")
            raise StorageError("Failed to count stored applications") from e
        return row[0]
