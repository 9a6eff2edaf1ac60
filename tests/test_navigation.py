import pytest

from ferrolearn.locale import Locale
from ferrolearn.navigation import (
    AppShell,
    Route,
    lesson_nav,
    match_route,
    nav_icon,
    nav_items,
)


def test_nav_items_english_labels_and_hrefs():
    items = nav_items(Locale.EN)
    assert [href for href, _, _ in items] == [
        "/", "/theory", "/practice", "/projects", "/settings"
    ]
    assert [label for _, label, _ in items] == [
        "Dashboard", "Theory", "Practice", "Projects", "Settings"
    ]
    assert [icon for _, _, icon in items] == [
        "dashboard", "theory", "practice", "projects", "settings"
    ]


def test_nav_items_spanish_labels():
    labels = [label for _, label, _ in nav_items("es")]
    assert labels == ["Inicio", "Teoría", "Práctica", "Proyectos", "Configuración"]


@pytest.mark.parametrize("icon", ["dashboard", "theory", "practice", "projects", "settings"])
def test_nav_icon_is_svg(icon):
    svg = nav_icon(icon)
    assert svg.startswith("<svg")
    assert svg.endswith("</svg>")
    assert 'viewBox="0 0 24 24"' in svg


def test_nav_icon_settings_has_two_paths():
    assert nav_icon("settings").count("<path") == 2


def test_nav_icon_unknown_is_empty():
    assert nav_icon("unknown") == ""


def test_every_nav_item_has_an_icon_and_a_route():
    for href, _, icon in nav_items(Locale.EN):
        assert nav_icon(icon)
        assert match_route(href) is not None


@pytest.mark.parametrize(
    "path, page",
    [
        ("/", "Dashboard"),
        ("/theory", "ModuleList"),
        ("/practice", "ExerciseList"),
        ("/projects", "ProjectList"),
        ("/settings", "Settings"),
    ],
)
def test_match_static_routes(path, page):
    route = match_route(path)
    assert route.page == page
    assert route.params == {}


def test_match_lesson_route_params():
    route = match_route("/theory/m01_introduction/01_what_is_rust")
    assert route == Route(
        page="LessonView",
        pattern="/theory/:module_id/:lesson_id",
        params={"module_id": "m01_introduction", "lesson_id": "01_what_is_rust"},
    )


def test_match_module_and_exercise_routes():
    assert match_route("/theory/m02").params == {"module_id": "m02"}
    assert match_route("/theory/m02").page == "ModuleList"
    assert match_route("/practice/ex1").params == {"exercise_id": "ex1"}
    assert match_route("/projects/p1").page == "ProjectView"


def test_match_ignores_query_string():
    assert match_route("/practice/ex1?x=1").params == {"exercise_id": "ex1"}


@pytest.mark.parametrize("path", ["/nowhere", "/theory/a/b/c", "/settings/extra"])
def test_unmatched_routes(path):
    assert match_route(path) is None


def test_lesson_nav_both_enabled():
    prev, nxt = lesson_nav("/theory/m1/l1", "/theory/m1/l3", Locale.EN)
    assert prev.label == "Previous"
    assert nxt.label == "Next"
    assert prev.url == "/theory/m1/l1"
    assert nxt.url == "/theory/m1/l3"
    assert prev.enabled and nxt.enabled
    assert "cursor-not-allowed" not in prev.classes
    assert "bg-orange-600" in nxt.classes


def test_lesson_nav_missing_urls_disabled():
    prev, nxt = lesson_nav(None, None, Locale.ES)
    assert prev.label == "Anterior"
    assert nxt.label == "Siguiente"
    assert not prev.enabled
    assert not nxt.enabled
    assert "cursor-not-allowed" in prev.classes
    assert "cursor-not-allowed" in nxt.classes


def test_shell_defaults():
    shell = AppShell()
    assert shell.sidebar_open is True
    assert shell.locale is Locale.ES
    assert shell.dark_mode is False
    assert shell.playground.is_open is False


def test_toggle_sidebar_changes_width():
    shell = AppShell()
    assert shell.sidebar_classes.endswith("w-64")
    shell.toggle_sidebar()
    assert shell.sidebar_open is False
    assert shell.sidebar_classes.endswith("w-16")
    shell.toggle_sidebar()
    assert shell.sidebar_open is True


def test_toggle_locale_and_theme():
    shell = AppShell()
    shell.toggle_locale()
    assert shell.locale is Locale.EN
    shell.toggle_locale()
    assert shell.locale is Locale.ES
    shell.toggle_theme()
    assert shell.dark_mode is True
    shell.toggle_theme()
    assert shell.dark_mode is False


def test_ctrl_shift_p_toggles_playground():
    shell = AppShell()
    assert shell.handle_key("P", ctrl=True, shift=True) is True
    assert shell.playground.is_open is True
    assert shell.handle_key("P", ctrl=True, shift=True) is True
    assert shell.playground.is_open is False


def test_plain_p_does_nothing():
    shell = AppShell()
    assert shell.handle_key("P") is False
    assert shell.handle_key("p", ctrl=True, shift=True) is False
    assert shell.playground.is_open is False


def test_escape_closes_playground():
    shell = AppShell()
    shell.playground.toggle()
    assert shell.handle_key("Escape") is False
    assert shell.playground.is_open is False
    shell.handle_key("Escape")
    assert shell.playground.is_open is False