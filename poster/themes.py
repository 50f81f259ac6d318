"""
Poster themes.

Each theme picks the background template of the poster. Everything else
(subject placement, decorative layers) is shared by all themes.
"""

from enum import Enum
from typing import Optional


class Theme(Enum):
    """Available poster themes."""

    PROFESSIONAL = "professional"
    ARTISTIC = "artistic"
    SUPERHERO = "superhero"
    DOCTOR = "doctor"


# Theme -> background asset filename
THEME_BACKGROUNDS = {
    Theme.PROFESSIONAL: "bg_professional.jpg",
    Theme.ARTISTIC: "bg_artistic.jpeg",
    Theme.SUPERHERO: "bg_superhero.jpg",
    Theme.DOCTOR: "bg_doctor.jpeg",
}

DEFAULT_BACKGROUND = "bg.png"

THEME_DESCRIPTIONS = {
    Theme.PROFESSIONAL: "Professional",
    Theme.ARTISTIC: "Artistic",
    Theme.SUPERHERO: "Superhero",
    Theme.DOCTOR: "Doctor",
}


def normalize_theme(theme: Optional[str]) -> str:
    """Normalize a user supplied theme key ("  Artistic " -> "artistic")."""
    return (theme or "").strip().lower()


def parse_theme(theme: Optional[str]) -> Optional[Theme]:
    """
    Look up a theme by key.

    Returns:
        The matching Theme, or None for unknown keys
    """
    key = normalize_theme(theme)
    for t in Theme:
        if t.value == key:
            return t
    return None


def resolve_background(theme: Optional[str]) -> str:
    """
    Resolve a theme key to its background asset filename.

    Unknown or empty keys fall back to DEFAULT_BACKGROUND.

    Examples:
        >>> resolve_background("artistic")
        'bg_artistic.jpeg'
        >>> resolve_background("xyz")
        'bg.png'
    """
    parsed = parse_theme(theme)
    if parsed is None:
        return DEFAULT_BACKGROUND
    return THEME_BACKGROUNDS[parsed]


def theme_slug(theme: Optional[str]) -> str:
    """Theme key safe for use in output filenames ("default" for unknown keys)."""
    parsed = parse_theme(theme)
    return parsed.value if parsed else "default"


def get_theme_options() -> list:
    """Get list of available themes for user selection."""
    return [
        {
            "id": theme.value,
            "name": THEME_DESCRIPTIONS[theme],
            "background": background,
        }
        for theme, background in THEME_BACKGROUNDS.items()
    ]
