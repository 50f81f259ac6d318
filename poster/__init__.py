# Poster Module
# Remote API for background removal, Code for everything on the poster

from .assets import AssetStore
from .booth import CompositionResult, SelfieBooth
from .composer import PosterComposer
from .errors import AssetMissing, EncodingFailed, IOFailure, PosterError, RemovalFailed
from .layout import DEFAULT_LAYOUT, DecorationSpec, PosterLayout
from .renderer import Layer, PosterRenderer
from .storage import PosterStore
from .themes import Theme, get_theme_options, resolve_background

__all__ = [
    "AssetStore",
    "CompositionResult",
    "SelfieBooth",
    "PosterComposer",
    "PosterError",
    "AssetMissing",
    "EncodingFailed",
    "IOFailure",
    "RemovalFailed",
    "DEFAULT_LAYOUT",
    "DecorationSpec",
    "PosterLayout",
    "Layer",
    "PosterRenderer",
    "PosterStore",
    "Theme",
    "get_theme_options",
    "resolve_background",
]
