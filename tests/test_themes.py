import pytest

from poster.themes import (
    DEFAULT_BACKGROUND,
    THEME_BACKGROUNDS,
    Theme,
    get_theme_options,
    parse_theme,
    resolve_background,
    theme_slug,
)


@pytest.mark.parametrize("theme, expected", [
    ("professional", "bg_professional.jpg"),
    ("artistic", "bg_artistic.jpeg"),
    ("superhero", "bg_superhero.jpg"),
    ("doctor", "bg_doctor.jpeg"),
])
def test_known_themes_resolve_to_their_background(theme, expected):
    assert resolve_background(theme) == expected


@pytest.mark.parametrize("theme", ["xyz", "", None, "dark", "default"])
def test_unknown_themes_fall_back_to_default(theme):
    assert resolve_background(theme) == DEFAULT_BACKGROUND


def test_theme_keys_are_normalized():
    assert parse_theme("  Artistic ") is Theme.ARTISTIC
    assert resolve_background("DOCTOR") == "bg_doctor.jpeg"


def test_every_theme_has_a_background():
    assert set(THEME_BACKGROUNDS) == set(Theme)


def test_theme_slug_is_filename_safe():
    assert theme_slug("superhero") == "superhero"
    assert theme_slug("../../etc/passwd") == "default"


def test_theme_options():
    options = get_theme_options()
    assert [o["id"] for o in options] == ["professional", "artistic", "superhero", "doctor"]
    assert options[1]["background"] == "bg_artistic.jpeg"
