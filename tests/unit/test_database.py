from __future__ import annotations

import sqlite3

import pytest

from teatree_scraper.errors import StorageError
from teatree_scraper.models import DevelopmentApplication
from teatree_scraper.storage import ApplicationDatabase


def _application(number: str = "123/2019", reason: str = "Fence") -> DevelopmentApplication:
    return DevelopmentApplication(
        application_number=number,
        address="10 Park Lane SA 5091",
        reason=reason,
        information_url="https://example.com/main",
        comment_url="mailto:someone@example.com",
        scrape_date="2019-06-20",
        received_date="2019-06-01",
    )


def test_ensure_schema_is_idempotent_and_orders_columns(tmp_path):
    with ApplicationDatabase(tmp_path / "data.sqlite") as database:
        database.ensure_schema()
        database.ensure_schema()
        columns = database.connection.execute("pragma table_info([data])").fetchall()

    assert [c[1] for c in columns] == [
        "council_reference", "address", "description", "info_url", "comment_url",
        "date_scraped", "date_received", "on_notice_from", "on_notice_to",
    ]
    assert [c[5] for c in columns][0] == 1  # council_reference is the primary key


def test_insert_if_absent_inserts_then_skips(tmp_path):
    with ApplicationDatabase(tmp_path / "data.sqlite") as database:
        database.ensure_schema()

        assert database.insert_if_absent(_application()) is True
        assert database.insert_if_absent(_application(reason="Changed")) is False
        assert database.count() == 1

    conn = sqlite3.connect(tmp_path / "data.sqlite")
    row = conn.execute("select * from [data]").fetchone()
    conn.close()
    assert row == (
        "123/2019", "10 Park Lane SA 5091", "Fence", "https://example.com/main",
        "mailto:someone@example.com", "2019-06-20", "2019-06-01", None, None,
    )


def test_insert_logs_inserted_and_skipped(tmp_path, caplog):
    caplog.set_level("INFO", logger="teatree_scraper")

    with ApplicationDatabase(tmp_path / "data.sqlite") as database:
        database.ensure_schema()
        database.insert_if_absent(_application())
        database.insert_if_absent(_application())

    messages = [r.getMessage() for r in caplog.records]
    assert any(
        'Inserted: application "123/2019" with address "10 Park Lane SA 5091" and reason "Fence"' in m
        for m in messages
    )
    assert any("Skipped:" in m and "already present in the database" in m for m in messages)


def test_inserts_are_committed_individually(tmp_path):
    path = tmp_path / "data.sqlite"
    with ApplicationDatabase(path) as database:
        database.ensure_schema()
        database.insert_if_absent(_application("1/2019"))

        other = sqlite3.connect(path)
        assert other.execute("select count(*) from [data]").fetchone()[0] == 1
        other.close()


def test_insert_without_schema_raises_storage_error(tmp_path):
    with ApplicationDatabase(tmp_path / "data.sqlite") as database:
        with pytest.raises(StorageError):
            database.insert_if_absent(_application())


def test_closed_database_raises_storage_error(tmp_path):
    database = ApplicationDatabase(tmp_path / "data.sqlite")

    with pytest.raises(StorageError):
        database.ensure_schema()
