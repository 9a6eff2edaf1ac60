import sqlite3

import pytest

from ferrolearn.db import Database, init_db, run_migrations


def _tables(conn):
    rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
    return {name for (name,) in rows}


def test_init_db_creates_tables(tmp_path):
    db = init_db(tmp_path / "rust_for_everyone.db")
    try:
        assert {"user_progress", "user_settings", "user_notes"} <= _tables(db.conn)
    finally:
        db.close()
    assert (tmp_path / "rust_for_everyone.db").exists()


def test_init_db_enables_wal(tmp_path):
    db = init_db(str(tmp_path / "app.db"))
    try:
        (mode,) = db.conn.execute("PRAGMA journal_mode").fetchone()
        assert mode.lower() == "wal"
    finally:
        db.close()


def test_run_migrations_is_idempotent():
    conn = sqlite3.connect(":memory:")
    run_migrations(conn)
    conn.execute(
        "INSERT INTO user_settings (key, value) VALUES (?, ?)", ("theme", "dark")
    )
    run_migrations(conn)
    assert conn.execute("SELECT value FROM user_settings").fetchall() == [("dark",)]
    conn.close()


def test_progress_defaults_from_schema(tmp_path):
    with init_db(tmp_path / "app.db") as db:
        db.conn.execute(
            "INSERT INTO user_progress (id, category, updated_at) VALUES (?, ?, ?)",
            ("l1", "lesson", "2024-01-01T00:00:00+00:00"),
        )
        row = db.conn.execute(
            "SELECT status, score, attempts, completed_at FROM user_progress"
        ).fetchone()
        assert row == ("locked", 0, 0, None)


def test_close_and_context_manager(tmp_path):
    with init_db(tmp_path / "app.db") as db:
        assert isinstance(db, Database)
    with pytest.raises(sqlite3.ProgrammingError):
        db.conn.execute("SELECT 1")


def test_init_db_missing_directory(tmp_path):
    with pytest.raises(sqlite3.OperationalError):
        init_db(tmp_path / "missing" / "app.db")