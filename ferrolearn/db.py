"""SQLite storage: opening the database and creating its tables."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass, field
from os import PathLike

__all__ = [
    "CREATE_USER_PROGRESS",
    "CREATE_USER_SETTINGS",
    "CREATE_USER_NOTES",
    "Database",
    "run_migrations",
    "init_db",
]

CREATE_USER_PROGRESS = """
CREATE TABLE IF NOT EXISTS user_progress (
    id TEXT PRIMARY KEY,
    category TEXT NOT NULL,
    status TEXT NOT NULL DEFAULT 'locked',
    score INTEGER DEFAULT 0,
    attempts INTEGER DEFAULT 0,
    completed_at TEXT,
    updated_at TEXT NOT NULL
);
"""

CREATE_USER_SETTINGS = """
CREATE TABLE IF NOT EXISTS user_settings (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""

CREATE_USER_NOTES = """
CREATE TABLE IF NOT EXISTS user_notes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    content_id TEXT NOT NULL,
    note TEXT NOT NULL,
    created_at TEXT NOT NULL
);
"""

_MIGRATIONS = (CREATE_USER_PROGRESS, CREATE_USER_SETTINGS, CREATE_USER_NOTES)


@dataclass
class Database:
    """A SQLite connection shared between callers; hold ``lock`` while using ``conn``."""

    conn: sqlite3.Connection
    lock: threading.Lock = field(default_factory=threading.Lock)

    def close(self) -> None:
        """Close the underlying connection."""
        with self.lock:
            self.conn.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def run_migrations(conn: sqlite3.Connection) -> None:
    """Create every table that does not exist yet; safe to call on each start."""
    for statement in _MIGRATIONS:
        conn.executescript(statement)


def init_db(db_path: str | PathLike[str]) -> Database:
    """Open or create the database at ``db_path``, enable WAL and run migrations."""
    conn = sqlite3.connect(db_path, check_same_thread=False)
    try:
        conn.execute("PRAGMA journal_mode = WAL")
        run_migrations(conn)
    except sqlite3.Error:
        conn.close()
        raise
    return Database(conn)