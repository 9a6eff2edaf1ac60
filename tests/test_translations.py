import dataclasses

import pytest

from ferrolearn.locale import Locale
from ferrolearn.translations import TranslationSet, get_translations


def test_english_navigation():
    tr = get_translations(Locale.EN)
    assert tr.nav_dashboard == "Dashboard"
    assert tr.nav_theory == "Theory"
    assert tr.common_run == "Run"


def test_spanish_navigation():
    tr = get_translations(Locale.ES)
    assert tr.nav_dashboard == "Inicio"
    assert tr.nav_theory == "Teoría"
    assert tr.common_run == "Ejecutar"


def test_shared_strings_are_identical():
    es = get_translations(Locale.ES)
    en = get_translations(Locale.EN)
    assert es.playground_title == en.playground_title == "Rust Playground"
    assert es.playground_mode_local == en.playground_mode_local == "Local"


def test_lookup_by_code_matches_enum():
    for locale in Locale:
        assert get_translations(locale.value) is get_translations(locale)


def test_unknown_locale_raises():
    with pytest.raises(ValueError):
        get_translations("xx")


@pytest.mark.parametrize("locale", list(Locale))
def test_every_field_is_a_nonempty_string(locale):
    tr = get_translations(locale)
    for field in dataclasses.fields(TranslationSet):
        value = getattr(tr, field.name)
        assert isinstance(value, str) and value.strip(), field.name


def test_languages_differ_for_most_fields():
    es = get_translations(Locale.ES)
    en = get_translations(Locale.EN)
    names = [f.name for f in dataclasses.fields(TranslationSet)]
    differing = [n for n in names if getattr(es, n) != getattr(en, n)]
    assert len(differing) > len(names) // 2


def test_translation_sets_are_immutable():
    tr = get_translations(Locale.EN)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tr.nav_dashboard = "changed"
    assert tr.nav_dashboard == "Dashboard"


def test_error_explanation_strings():
    en = get_translations(Locale.EN)
    es = get_translations(Locale.ES)
    assert en.error_e0384_fix.startswith("Add 'mut'")
    assert es.error_e0384_fix == "Agrega 'mut' a la declaracion: let mut variable = valor;"


def test_difficulty_labels():
    en = get_translations(Locale.EN)
    es = get_translations(Locale.ES)
    assert (en.common_beginner, en.common_intermediate, en.common_advanced) == (
        "Beginner",
        "Intermediate",
        "Advanced",
    )
    assert (es.common_beginner, es.common_intermediate, es.common_advanced) == (
        "Principiante",
        "Intermedio",
        "Avanzado",
    )