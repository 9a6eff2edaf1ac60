import math

import pytest

from ferrolearn.locale import Locale
from ferrolearn.models import ProgressStatus
from ferrolearn.widgets import (
    completion_check_classes,
    difficulty_classes,
    difficulty_label,
    loading_text,
    progress_badge,
    progress_ring,
    render_markdown,
)


def test_difficulty_classes_known_levels():
    assert difficulty_classes("beginner").endswith(
        "bg-green-100 text-green-800 dark:bg-green-900 dark:text-green-200"
    )
    assert "bg-yellow-100" in difficulty_classes("intermediate")
    assert "bg-red-100" in difficulty_classes("advanced")


def test_difficulty_classes_unknown_level_is_gray():
    classes = difficulty_classes("expert")
    assert classes.startswith("inline-block px-2.5 py-0.5 rounded-full text-xs font-medium")
    assert "bg-gray-100 text-gray-800" in classes


@pytest.mark.parametrize(
    ("level", "locale", "expected"),
    [
        ("beginner", Locale.ES, "Principiante"),
        ("intermediate", Locale.ES, "Intermedio"),
        ("advanced", Locale.ES, "Avanzado"),
        ("beginner", Locale.EN, "Beginner"),
        ("intermediate", Locale.EN, "Intermediate"),
        ("advanced", Locale.EN, "Advanced"),
    ],
)
def test_difficulty_label(level, locale, expected):
    assert difficulty_label(level, locale) == expected


def test_difficulty_label_unknown_passes_through():
    assert difficulty_label("legendary", Locale.EN) == "legendary"


def test_progress_badge_labels():
    assert progress_badge(ProgressStatus.LOCKED)[0] == "Locked"
    assert progress_badge(ProgressStatus.IN_PROGRESS) == (
        "In Progress",
        "inline-block px-2 py-0.5 rounded-full text-xs font-medium bg-yellow-500 text-black",
    )


def test_progress_badge_accepts_status_value():
    assert progress_badge("completed") == progress_badge(ProgressStatus.COMPLETED)


def test_progress_badge_rejects_unknown_status():
    with pytest.raises(ValueError):
        progress_badge("finished")


def test_progress_ring_geometry_invariants():
    ring = progress_ring(40.0, 120)
    assert ring.center == 60.0
    assert ring.radius == ring.center - 5.0
    assert math.isclose(ring.circumference, 2 * math.pi * ring.radius)
    assert 0 < ring.offset < ring.circumference


def test_progress_ring_default_size():
    assert progress_ring(10.0).size == 80


def test_progress_ring_empty_and_full():
    empty = progress_ring(0.0)
    full = progress_ring(100.0)
    assert math.isclose(empty.offset, empty.circumference)
    assert math.isclose(full.offset, 0.0, abs_tol=1e-9)


@pytest.mark.parametrize(
    ("percent", "colour"),
    [
        (0.0, "text-gray-400"),
        (24.9, "text-gray-400"),
        (25.0, "text-yellow-500"),
        (49.9, "text-yellow-500"),
        (50.0, "text-green-500"),
        (74.9, "text-green-500"),
        (75.0, "text-orange-500"),
        (100.0, "text-orange-500"),
    ],
)
def test_progress_ring_colour_thresholds(percent, colour):
    assert progress_ring(percent).color_class == colour


def test_progress_ring_label_rounds():
    assert progress_ring(33.4).label() == "33%"
    assert progress_ring(100.0).label() == "100%"


def test_progress_ring_rejects_negative_size():
    with pytest.raises(ValueError):
        progress_ring(10.0, -1)


def test_completion_check_classes():
    assert "bg-green-500 text-white" in completion_check_classes(True)
    assert "border-2 border-gray-300" in completion_check_classes(False)
    assert completion_check_classes(True) != completion_check_classes(False)


def test_loading_text():
    assert loading_text(Locale.ES) == "Cargando..."
    assert loading_text(Locale.EN) == "Loading..."
    assert loading_text("en") == "Loading..."


def test_render_markdown_paragraph():
    assert render_markdown("**bold**") == "<p><strong>bold</strong></p>\n"


def test_render_markdown_table_and_strikethrough():
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n\n~~gone~~\n")
    assert "<table>" in html
    assert "<del>gone</del>" in html


def test_render_markdown_inline_code():
    assert "<code>let x</code>" in render_markdown("Use `let x` here")