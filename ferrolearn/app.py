"""The application backend: storage, content and the commands it answers."""

from __future__ import annotations

import argparse
import json
import os
import sqlite3
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from ferrolearn import compiler
from ferrolearn import progress_store
from ferrolearn.compiler import CompilerError
from ferrolearn.content import ContentDir, ContentError
from ferrolearn.db import Database, init_db

__all__ = ["DB_FILENAME", "resolve_content_dir", "Backend", "create_backend", "main"]

DB_FILENAME = "rust_for_everyone.db"
APP_NAME = "ferrolearn"


def resolve_content_dir(
    cwd: str | os.PathLike[str] | None = None,
    exe_path: str | os.PathLike[str] | None = None,
) -> Path:
    """Find the ``content`` directory.

    It is looked for in the working directory, then in its parent, and otherwise
    assumed to sit next to the executable.
    """
    cwd_path = Path.cwd() if cwd is None else Path(cwd)
    candidate = cwd_path / "content"
    if candidate.exists():
        return candidate
    parent_candidate = cwd_path.parent / "content"
    if parent_candidate.exists():
        return parent_candidate
    if exe_path is None and sys.argv and sys.argv[0]:
        exe_path = Path(sys.argv[0]).resolve()
    exe_dir = cwd_path if exe_path is None else Path(exe_path).parent
    return exe_dir / "content"


def _default_data_dir() -> Path:
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / APP_NAME


@dataclass(frozen=True)
class _Command:
    handler: Callable[..., Any]
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()

    def check(self, name: str, args: Mapping[str, Any]) -> None:
        allowed = set(self.required) | set(self.optional)
        unexpected = sorted(set(args) - allowed)
        if unexpected:
            raise ValueError(
                f"invalid arguments for {name}: unexpected {', '.join(unexpected)}"
            )
        missing = [key for key in self.required if key not in args]
        if missing:
            raise ValueError(f"invalid arguments for {name}: missing {', '.join(missing)}")


class Backend:
    """Answers the commands of the learning application by name."""

    def __init__(self, db: Database, content: ContentDir) -> None:
        self.db = db
        self.content = content
        self._handlers: dict[str, _Command] = {
            "compile_and_run": _Command(self._compile_and_run, ("code",), ("timeout_secs",)),
            "compile_and_run_hybrid": _Command(self._compile_and_run_hybrid, ("code",)),
            "clippy_check": _Command(self._clippy_check, ("code",)),
            "check_rust_available": _Command(self._check_rust_available),
            "get_progress": _Command(self._get_progress, ("id",), ("category",)),
            "save_progress": _Command(
                self._save_progress, ("id", "category", "status", "score")
            ),
            "get_all_progress": _Command(self._get_all_progress),
            "load_content": _Command(self.content.load, ("path",)),
            "list_content_dir": _Command(self.content.list_dir_json, ("path",)),
        }

    @property
    def commands(self) -> list[str]:
        """Names of the commands this backend answers."""
        return sorted(self._handlers)

    def invoke(self, command: str, args: Mapping[str, Any] | None = None) -> Any:
        """Run ``command`` with keyword ``args`` and return plain, JSON-ready data."""
        entry = self._handlers.get(command)
        if entry is None:
            raise ValueError(f"unknown command: {command}")
        kwargs = dict(args or {})
        entry.check(command, kwargs)
        return entry.handler(**kwargs)

    def close(self) -> None:
        """Release the database."""
        self.db.close()

    def __enter__(self) -> Backend:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @staticmethod
    def _compile_and_run(code: str, timeout_secs: int | None = None) -> dict[str, Any]:
        return asdict(compiler.compile_and_run(code, timeout_secs))

    @staticmethod
    def _compile_and_run_hybrid(code: str) -> dict[str, Any]:
        return asdict(compiler.compile_and_run_hybrid(code))

    @staticmethod
    def _clippy_check(code: str) -> dict[str, Any]:
        return asdict(compiler.clippy_check(code))

    @staticmethod
    def _check_rust_available() -> dict[str, Any]:
        return asdict(compiler.check_rust_available())

    def _get_progress(self, id: str, category: str | None = None) -> dict[str, Any] | None:
        record = progress_store.get_progress(self.db, id, category)
        return None if record is None else asdict(record)

    def _save_progress(self, id: str, category: str, status: str, score: int) -> None:
        progress_store.save_progress(self.db, id, category, status, score)

    def _get_all_progress(self) -> list[dict[str, Any]]:
        return [asdict(record) for record in progress_store.get_all_progress(self.db)]


def create_backend(
    data_dir: str | os.PathLike[str] | None = None,
    content_dir: str | os.PathLike[str] | None = None,
) -> Backend:
    """Open the database in ``data_dir`` and serve content from ``content_dir``."""
    data_path = _default_data_dir() if data_dir is None else Path(data_dir)
    data_path.mkdir(parents=True, exist_ok=True)
    db = init_db(data_path / DB_FILENAME)
    content_path = resolve_content_dir() if content_dir is None else Path(content_dir)
    print(f"[{APP_NAME}] Content directory: {content_path}", file=sys.stderr)
    return Backend(db, ContentDir(content_path))


def main(argv: Sequence[str] | None = None) -> int:
    """Run one backend command and print its result as JSON."""
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Run a backend command.")
    parser.add_argument("command", help="command name, e.g. load_content")
    parser.add_argument("--args", default="{}", help="command arguments as a JSON object")
    parser.add_argument("--data-dir", help="directory for the progress database")
    parser.add_argument("--content-dir", help="directory holding course content")
    options = parser.parse_args(argv)

    try:
        args = json.loads(options.args)
    except json.JSONDecodeError as exc:
        parser.error(f"--args is not valid JSON: {exc}")
    if not isinstance(args, dict):
        parser.error("--args must be a JSON object")

    try:
        with create_backend(options.data_dir, options.content_dir) as backend:
            result = backend.invoke(options.command, args)
    except (CompilerError, ContentError, ValueError, sqlite3.Error, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result, ensure_ascii=False))
    return 0