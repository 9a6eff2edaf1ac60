"""Read-only access to the course content directory."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

__all__ = ["ContentError", "AccessDeniedError", "ContentDir"]


class ContentError(Exception):
    """A content file or directory could not be read."""


class AccessDeniedError(ContentError):
    """A path pointed outside the content directory."""


@dataclass(frozen=True)
class ContentDir:
    """The directory holding course content, with reads confined to it."""

    root: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))

    def _resolve(self, path: str, missing: str) -> Path:
        try:
            target = (self.root / path).resolve(strict=True)
        except OSError as exc:
            raise ContentError(f"{missing}: {path} ({exc})") from exc
        try:
            root = self.root.resolve(strict=True)
        except OSError as exc:
            raise ContentError(f"Content directory not found: {exc}") from exc
        if not target.is_relative_to(root):
            raise AccessDeniedError("Access denied: path is outside the content directory")
        return target

    def load(self, path: str) -> str:
        """Return the text of the file at ``path``, relative to the content root."""
        target = self._resolve(path, "File not found")
        try:
            return target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ContentError(f"Failed to read {path}: {exc}") from exc

    def list_dir(self, path: str) -> list[dict[str, object]]:
        """Return ``{"name", "is_dir"}`` entries of the directory at ``path``."""
        target = self._resolve(path, "Directory not found")
        try:
            with os.scandir(target) as entries:
                return [_entry(entry) for entry in entries]
        except OSError as exc:
            raise ContentError(f"Failed to read directory {path}: {exc}") from exc

    def list_dir_json(self, path: str) -> str:
        """Return the listing of ``path`` as a compact JSON array."""
        return json.dumps(
            self.list_dir(path), separators=(",", ":"), sort_keys=True, ensure_ascii=False
        )


def _entry(entry: os.DirEntry[str]) -> dict[str, object]:
    try:
        is_dir = entry.is_dir(follow_symlinks=False)
    except OSError:
        is_dir = False
    return {"name": entry.name, "is_dir": is_dir}