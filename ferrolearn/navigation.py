"""Application navigation: sidebar entries, routes, lesson paging and the shell state."""

from __future__ import annotations

from dataclasses import dataclass, field

from ferrolearn.locale import DEFAULT_LOCALE, Locale
from ferrolearn.playground import Playground
from ferrolearn.translations import get_translations

__all__ = [
    "APP_TITLE",
    "NOT_FOUND_TEXT",
    "nav_items",
    "nav_icon",
    "Route",
    "ROUTES",
    "match_route",
    "NavButton",
    "lesson_nav",
    "AppShell",
]

APP_TITLE = "Rust for Everyone"
NOT_FOUND_TEXT = "Page not found"

_NAV_ENTRIES = (
    ("/", "nav_dashboard", "dashboard"),
    ("/theory", "nav_theory", "theory"),
    ("/practice", "nav_practice", "practice"),
    ("/projects", "nav_projects", "projects"),
    ("/settings", "nav_settings", "settings"),
)

_SVG_OPEN = '<svg fill="none" stroke="currentColor" viewBox="0 0 24 24" class="w-5 h-5">'
_PATH = '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="{}" />'


def _svg(*paths: str) -> str:
    return _SVG_OPEN + "".join(_PATH.format(d) for d in paths) + "</svg>"


_ICONS = {
    "dashboard": _svg(
        "M3 12l2-2m0 0l7-7 7 7M5 10v10a1 1 0 001 1h3m10-11l2 2m-2-2v10a1 1 0 01-1 1h-3"
        "m-4 0a1 1 0 01-1-1v-4a1 1 0 011-1h2a1 1 0 011 1v4a1 1 0 01-1 1h-2z"
    ),
    "theory": _svg(
        "M12 6.253v13m0-13C10.832 5.477 9.246 5 7.5 5S4.168 5.477 3 6.253v13"
        "C4.168 18.477 5.754 18 7.5 18s3.332.477 4.5 1.253m0-13C13.168 5.477 14.754 5 16.5 5"
        "c1.747 0 3.332.477 4.5 1.253v13C19.832 18.477 18.247 18 16.5 18"
        "c-1.746 0-3.332.477-4.5 1.253"
    ),
    "practice": _svg("M10 20l4-16m4 4l4 4-4 4M6 16l-4-4 4-4"),
    "projects": _svg(
        "M3 7v10a2 2 0 002 2h14a2 2 0 002-2V9a2 2 0 00-2-2h-6l-2-2H5a2 2 0 00-2 2z"
    ),
    "settings": _svg(
        "M10.325 4.317c.426-1.756 2.924-1.756 3.35 0a1.724 1.724 0 002.573 1.066"
        "c1.543-.94 3.31.826 2.37 2.37a1.724 1.724 0 001.066 2.573c1.756.426 1.756 2.924 0 3.35"
        "a1.724 1.724 0 00-1.066 2.573c.94 1.543-.826 3.31-2.37 2.37a1.724 1.724 0 00-2.573 1.066"
        "c-.426 1.756-2.924 1.756-3.35 0a1.724 1.724 0 00-2.573-1.066c-1.543.94-3.31-.826-2.37-2.37"
        "a1.724 1.724 0 00-1.066-2.573c-1.756-.426-1.756-2.924 0-3.35a1.724 1.724 0 001.066-2.573"
        "c-.94-1.543.826-3.31 2.37-2.37.996.608 2.296.07 2.572-1.065z",
        "M15 12a3 3 0 11-6 0 3 3 0 016 0z",
    ),
}


def nav_items(locale: Locale | str) -> list[tuple[str, str, str]]:
    """Return the sidebar entries as ``(href, label, icon_type)`` in display order."""
    tr = get_translations(Locale(locale))
    return [(href, getattr(tr, key), icon) for href, key, icon in _NAV_ENTRIES]


def nav_icon(icon_type: str) -> str:
    """Return the SVG markup of a sidebar icon, or an empty string for an unknown one."""
    return _ICONS.get(icon_type, "")


@dataclass(frozen=True, slots=True)
class Route:
    """A page matched by a path, with the parameters taken from the path."""

    page: str
    pattern: str
    params: dict[str, str] = field(default_factory=dict)


ROUTES: tuple[tuple[str, str], ...] = (
    ("/", "Dashboard"),
    ("/theory", "ModuleList"),
    ("/theory/:module_id", "ModuleList"),
    ("/theory/:module_id/:lesson_id", "LessonView"),
    ("/practice", "ExerciseList"),
    ("/practice/:exercise_id", "ExerciseView"),
    ("/projects", "ProjectList"),
    ("/projects/:project_id", "ProjectView"),
    ("/settings", "Settings"),
)


def _segments(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def _match(pattern: str, parts: list[str]) -> dict[str, str] | None:
    expected = _segments(pattern)
    if len(expected) != len(parts):
        return None
    params: dict[str, str] = {}
    for want, got in zip(expected, parts):
        if want.startswith(":"):
            params[want[1:]] = got
        elif want != got:
            return None
    return params


def match_route(path: str) -> Route | None:
    """Return the route that ``path`` leads to, or None when no page matches."""
    path = path.split("#", 1)[0].split("?", 1)[0]
    parts = _segments(path)
    for pattern, page in ROUTES:
        params = _match(pattern, parts)
        if params is not None:
            return Route(page=page, pattern=pattern, params=params)
    return None


_PREV_ENABLED = (
    "flex items-center px-4 py-2 rounded-lg text-gray-700 dark:text-gray-300 bg-gray-100 "
    "dark:bg-gray-800 hover:bg-gray-200 dark:hover:bg-gray-700 transition-colors"
)
_PREV_DISABLED = (
    "flex items-center px-4 py-2 rounded-lg text-gray-400 dark:text-gray-600 bg-gray-100 "
    "dark:bg-gray-800 cursor-not-allowed opacity-50"
)
_NEXT_ENABLED = (
    "flex items-center px-4 py-2 rounded-lg text-white bg-orange-600 hover:bg-orange-700 "
    "transition-colors shadow-md"
)
_NEXT_DISABLED = (
    "flex items-center px-4 py-2 rounded-lg text-gray-400 bg-gray-100 dark:bg-gray-800 "
    "cursor-not-allowed opacity-50"
)


@dataclass(frozen=True, slots=True)
class NavButton:
    """A previous or next button between lessons."""

    label: str
    url: str | None
    classes: str

    @property
    def enabled(self) -> bool:
        """Whether the button leads anywhere."""
        return self.url is not None


def lesson_nav(
    prev_url: str | None, next_url: str | None, locale: Locale | str
) -> tuple[NavButton, NavButton]:
    """Return the previous and next buttons; a missing URL gives a disabled button."""
    tr = get_translations(Locale(locale))
    prev = NavButton(
        tr.common_previous, prev_url, _PREV_ENABLED if prev_url is not None else _PREV_DISABLED
    )
    nxt = NavButton(
        tr.common_next, next_url, _NEXT_ENABLED if next_url is not None else _NEXT_DISABLED
    )
    return prev, nxt


_SIDEBAR_BASE = (
    "flex flex-col bg-gray-800 dark:bg-gray-950 text-white transition-all duration-300 "
    "ease-in-out border-r border-gray-700"
)


@dataclass
class AppShell:
    """The window around every page: sidebar, language, theme and playground."""

    sidebar_open: bool = True
    locale: Locale = DEFAULT_LOCALE
    dark_mode: bool = False
    playground: Playground = field(default_factory=Playground)

    @property
    def sidebar_classes(self) -> str:
        """CSS classes of the sidebar, wide when open and narrow when collapsed."""
        width = "w-64" if self.sidebar_open else "w-16"
        return f"{_SIDEBAR_BASE} {width}"

    def toggle_sidebar(self) -> None:
        """Expand or collapse the sidebar."""
        self.sidebar_open = not self.sidebar_open

    def toggle_locale(self) -> None:
        """Switch to the other language."""
        self.locale = self.locale.toggle()

    def toggle_theme(self) -> None:
        """Switch between light and dark mode."""
        self.dark_mode = not self.dark_mode

    def handle_key(self, key: str, ctrl: bool = False, shift: bool = False) -> bool:
        """React to a key press; return True when the browser default is to be suppressed.

        Ctrl+Shift+P toggles the playground and Escape closes it.
        """
        prevent = False
        if ctrl and shift and key == "P":
            prevent = True
            self.playground.toggle()
        if key == "Escape" and self.playground.is_open:
            self.playground.close()
        return prevent