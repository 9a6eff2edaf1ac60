"""Reading and writing a learner's progress records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from ferrolearn.db import Database

__all__ = ["Progress", "get_progress", "save_progress", "get_all_progress"]

_SELECT = (
    "SELECT id, category, status, score, attempts, completed_at, updated_at "
    "FROM user_progress"
)

_UPSERT = """
INSERT INTO user_progress (id, category, status, score, attempts, completed_at, updated_at)
VALUES (?, ?, ?, ?, 1, ?, ?)
ON CONFLICT(id) DO UPDATE SET
    category = excluded.category,
    status = excluded.status,
    score = excluded.score,
    attempts = attempts + 1,
    completed_at = COALESCE(excluded.completed_at, user_progress.completed_at),
    updated_at = excluded.updated_at
"""


@dataclass(slots=True)
class Progress:
    """One stored progress record for a lesson, exercise or project."""

    id: str
    category: str
    status: str
    score: int
    attempts: int
    completed_at: str | None
    updated_at: str


def get_progress(db: Database, progress_id: str, category: str | None = None) -> Progress | None:
    """Return the record with ``progress_id``, or None.

    ``category`` is accepted for symmetry with saving but does not narrow the lookup.
    """
    del category
    with db.lock:
        row = db.conn.execute(f"{_SELECT} WHERE id = ?", (progress_id,)).fetchone()
    return None if row is None else Progress(*row)


def save_progress(
    db: Database, progress_id: str, category: str, status: str, score: int
) -> None:
    """Create or update a record, counting each save as one more attempt.

    A ``completed`` status stamps the completion time; a completion time already
    stored is kept when a later save is not a completion.
    """
    now = datetime.now(timezone.utc).isoformat()
    completed_at = now if status == "completed" else None
    with db.lock, db.conn:
        db.conn.execute(_UPSERT, (progress_id, category, status, score, completed_at, now))


def get_all_progress(db: Database) -> list[Progress]:
    """Return every record, most recently updated first."""
    with db.lock:
        rows = db.conn.execute(f"{_SELECT} ORDER BY updated_at DESC").fetchall()
    return [Progress(*row) for row in rows]