"""Presentation helpers: badges, progress rings, loading text and Markdown."""

from __future__ import annotations

import math
from dataclasses import dataclass

from markdown_it import MarkdownIt

from ferrolearn.locale import Locale
from ferrolearn.models import ProgressStatus
from ferrolearn.translations import get_translations

__all__ = [
    "difficulty_classes",
    "difficulty_label",
    "progress_badge",
    "ProgressRing",
    "progress_ring",
    "completion_check_classes",
    "loading_text",
    "render_markdown",
]

_DIFFICULTY_BASE = "inline-block px-2.5 py-0.5 rounded-full text-xs font-medium"

_DIFFICULTY_COLOURS = {
    "beginner": "bg-green-100 text-green-800 dark:bg-green-900 dark:text-green-200",
    "intermediate": "bg-yellow-100 text-yellow-800 dark:bg-yellow-900 dark:text-yellow-200",
    "advanced": "bg-red-100 text-red-800 dark:bg-red-900 dark:text-red-200",
}

_DIFFICULTY_OTHER = "bg-gray-100 text-gray-800 dark:bg-gray-700 dark:text-gray-200"

_BADGE_BASE = "inline-block px-2 py-0.5 rounded-full text-xs font-medium"

_PROGRESS_BADGES = {
    ProgressStatus.LOCKED: ("Locked", "bg-gray-400 text-gray-800"),
    ProgressStatus.AVAILABLE: ("Available", "bg-blue-500 text-white"),
    ProgressStatus.IN_PROGRESS: ("In Progress", "bg-yellow-500 text-black"),
    ProgressStatus.COMPLETED: ("Completed", "bg-green-500 text-white"),
}

_COMPLETED_CLASSES = (
    "inline-flex items-center justify-center w-6 h-6 rounded-full bg-green-500 text-white"
)
_PENDING_CLASSES = (
    "inline-flex items-center justify-center w-6 h-6 rounded-full "
    "border-2 border-gray-300 dark:border-gray-600"
)

_LOADING_TEXT = {
    Locale.ES: "Cargando...",
    Locale.EN: "Loading...",
}

_RING_MARGIN = 5.0


def difficulty_classes(difficulty: str) -> str:
    """Return the CSS classes of the badge for a difficulty level."""
    colour = _DIFFICULTY_COLOURS.get(difficulty, _DIFFICULTY_OTHER)
    return f"{_DIFFICULTY_BASE} {colour}"


def difficulty_label(difficulty: str, locale: Locale | str) -> str:
    """Return the localized name of a difficulty level; unknown levels are shown as given."""
    tr = get_translations(locale)
    match difficulty:
        case "beginner":
            return tr.common_beginner
        case "intermediate":
            return tr.common_intermediate
        case "advanced":
            return tr.common_advanced
        case _:
            return difficulty


def progress_badge(status: ProgressStatus | str) -> tuple[str, str]:
    """Return the label and CSS classes of the badge for a progress status."""
    label, colour = _PROGRESS_BADGES[ProgressStatus(status)]
    return label, f"{_BADGE_BASE} {colour}"


@dataclass(frozen=True, slots=True)
class ProgressRing:
    """Geometry and colour of a circular progress indicator."""

    percent: float
    size: int
    radius: float
    circumference: float
    offset: float
    center: float
    color_class: str

    def label(self) -> str:
        """Return the percentage as shown in the middle of the ring."""
        return f"{self.percent:.0f}%"


def _ring_colour(percent: float) -> str:
    if percent < 25.0:
        return "text-gray-400"
    if percent < 50.0:
        return "text-yellow-500"
    if percent < 75.0:
        return "text-green-500"
    return "text-orange-500"


def progress_ring(percent: float, size: int = 80) -> ProgressRing:
    """Lay out a progress ring of ``size`` pixels filled to ``percent`` (0-100)."""
    if size < 0:
        raise ValueError("size must not be negative")
    center = size / 2.0
    radius = center - _RING_MARGIN
    circumference = 2.0 * math.pi * radius
    offset = circumference - (percent / 100.0) * circumference
    return ProgressRing(
        percent=float(percent),
        size=size,
        radius=radius,
        circumference=circumference,
        offset=offset,
        center=center,
        color_class=_ring_colour(percent),
    )


def completion_check_classes(completed: bool) -> str:
    """Return the CSS classes of the completion mark."""
    return _COMPLETED_CLASSES if completed else _PENDING_CLASSES


def loading_text(locale: Locale | str) -> str:
    """Return the text shown next to the loading spinner."""
    return _LOADING_TEXT[Locale(locale)]


_MARKDOWN = MarkdownIt("commonmark").enable(["table", "strikethrough"])


def render_markdown(text: str) -> str:
    """Render Markdown, with tables and strikethrough, to HTML."""
    return _MARKDOWN.render(text)