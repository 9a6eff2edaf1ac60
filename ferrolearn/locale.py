"""User interface languages."""

from __future__ import annotations

from enum import Enum

__all__ = ["Locale", "DEFAULT_LOCALE"]


class Locale(Enum):
    """A language the interface can be shown in."""

    ES = "es"
    EN = "en"

    def label(self) -> str:
        """Return the language's name as written in that language."""
        return _LABELS[self]

    def toggle(self) -> Locale:
        """Return the other supported language."""
        return Locale.EN if self is Locale.ES else Locale.ES


_LABELS = {
    Locale.ES: "Español",
    Locale.EN: "English",
}

DEFAULT_LOCALE = Locale.ES