"""
PosterComposer - Main compositing pipeline.

Combines:
- Themes: picks the background template
- PosterLayout: every size and offset on the poster
- AssetStore: bundled template/decorative images
- PosterRenderer: Pillow image manipulation

Paint order (later layers overlay earlier ones):
background -> subject -> gradient -> motif -> logo -> accent
"""

import logging
from typing import List, Optional, Union

from PIL import Image

from .assets import AssetStore
from .layout import DecorationSpec, PosterLayout, DEFAULT_LAYOUT
from .renderer import Layer, PosterRenderer
from .themes import resolve_background

logger = logging.getLogger(__name__)


class PosterComposer:
    """
    Composites a background-free subject onto a themed poster.

    Output depends only on the subject, the theme and the asset set, so
    identical inputs always produce pixel-identical posters.
    """

    def __init__(
        self,
        assets: AssetStore,
        layout: PosterLayout = DEFAULT_LAYOUT,
        renderer: Optional[PosterRenderer] = None
    ):
        self.assets = assets
        self.layout = layout
        self.renderer = renderer or assets.renderer

    def _decoration(self, name: str, spec: DecorationSpec) -> Layer:
        image = self.assets.open_image(spec.asset)
        if spec.cover and spec.height:
            image = self.renderer.cover_fit(image, spec.width, spec.height)
        else:
            image = self.renderer.scale_to_width(image, spec.width)
        return Layer(
            name=name,
            image=image,
            left=spec.left,
            top=spec.top(self.layout.frame_height),
            blend=spec.blend,
        )

    def build_layers(self, subject: Image.Image, theme: Optional[str]) -> List[Layer]:
        """
        Build the ordered layer stack for a poster.

        Args:
            subject: Background-free subject image
            theme: Theme key; unknown keys use the default background

        Returns:
            Layers in paint order
        """
        layout = self.layout
        width, height = layout.frame_size

        # Step 1: Background (cover fit to the full frame)
        background_name = resolve_background(theme)
        logger.info(f"Theme '{theme}' -> background {background_name}")
        background = self.renderer.cover_fit(
            self.assets.open_image(background_name), width, height
        )

        # Step 2: Subject (inside fit, placed from its actual size)
        person = self.renderer.inside_fit(subject, *layout.subject_box)
        person_left, person_top = layout.subject_position(person.width, person.height)
        logger.info(
            f"Subject {subject.width}x{subject.height} -> {person.width}x{person.height} "
            f"at ({person_left}, {person_top})"
        )

        # Step 3: White fade under the subject
        fade = self.renderer.linear_fade(width, layout.gradient_height)
        fade_left, fade_top = layout.gradient_position

        return [
            Layer("background", background, 0, 0),
            Layer("subject", person, person_left, person_top),
            Layer("gradient", fade, fade_left, fade_top),
            self._decoration("motif", layout.motif),
            self._decoration("logo", layout.logo),
            self._decoration("accent", layout.accent),
        ]

    def compose_image(
        self,
        subject: Union[bytes, Image.Image],
        theme: Optional[str]
    ) -> Image.Image:
        """
        Composite the poster and return it as an RGBA image.

        Raises:
            AssetMissing: If the background or a decorative asset is missing
            EncodingFailed: If the subject or an asset cannot be decoded
        """
        if isinstance(subject, Image.Image):
            subject = subject.convert("RGBA")
        else:
            subject = self.renderer.load_image(subject, label="subject image")

        layers = self.build_layers(subject, theme)
        return self.renderer.render(self.layout.frame_size, layers)

    def compose(self, subject_image_bytes: bytes, theme: Optional[str]) -> bytes:
        """
        Composite the poster and encode it as PNG.

        Args:
            subject_image_bytes: Subject with background already removed
            theme: Theme key

        Returns:
            PNG bytes of the 1080x1350 poster
        """
        poster = self.compose_image(subject_image_bytes, theme)
        logger.info(f"Poster composed ({poster.width}x{poster.height}, theme={theme})")
        return self.renderer.export_png(poster)
