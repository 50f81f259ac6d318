"""
PosterRenderer - Pillow-based image manipulation for poster composition.

Handles:
1. Decoding uploaded and bundled images
2. Cover / inside / width-based resizing
3. Generating the white fade overlay
4. Painting layers onto the frame (with clipping and blend modes)
5. Exporting the final PNG
"""

import io
import logging
from dataclasses import dataclass
from typing import Tuple

from PIL import Image, ImageChops, ImageDraw, ImageOps, UnidentifiedImageError

from .errors import EncodingFailed

logger = logging.getLogger(__name__)


BLEND_MODES = ("over", "multiply", "screen")


@dataclass
class Layer:
    """A single image placed on the poster frame."""
    name: str
    image: Image.Image
    left: int
    top: int
    blend: str = "over"

    @property
    def offset(self) -> Tuple[int, int]:
        return (self.left, self.top)


class PosterRenderer:
    """
    Renders posters using Pillow.

    All operations are pure: inputs are never modified and the same inputs
    always give pixel-identical output.
    """

    resample = Image.Resampling.LANCZOS

    def load_image(self, data: bytes, label: str = "image") -> Image.Image:
        """
        Decode image bytes into an RGBA image.

        Raises:
            EncodingFailed: If the bytes are not a readable image
        """
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise EncodingFailed(f"Cannot decode {label}: {e}")
        # Respect camera orientation before any geometry is computed
        image = ImageOps.exif_transpose(image)
        return image.convert("RGBA")

    def cover_fit(self, image: Image.Image, width: int, height: int) -> Image.Image:
        """Scale to fill (width, height) keeping aspect ratio, center-cropping overflow."""
        return ImageOps.fit(image, (width, height), self.resample, centering=(0.5, 0.5))

    def inside_fit(self, image: Image.Image, max_width: int, max_height: int) -> Image.Image:
        """
        Fit entirely inside (max_width, max_height) keeping aspect ratio.

        Never crops and never enlarges, so the result may be smaller than the
        box in one or both dimensions.
        """
        fitted = image.copy()
        fitted.thumbnail((max_width, max_height), self.resample)
        return fitted

    def scale_to_width(self, image: Image.Image, width: int) -> Image.Image:
        """Resize to an exact width, height follows the aspect ratio."""
        height = max(1, round(image.height * width / image.width))
        return image.resize((width, height), self.resample)

    def linear_fade(
        self,
        width: int,
        height: int,
        color: Tuple[int, int, int] = (255, 255, 255)
    ) -> Image.Image:
        """
        Create a vertical fade: transparent top row to opaque bottom row.
        """
        fade = Image.new("RGBA", (width, height), color + (0,))
        draw = ImageDraw.Draw(fade)

        last_row = max(height - 1, 1)
        for y in range(height):
            alpha = round(255 * y / last_row)
            draw.line([(0, y), (width, y)], fill=color + (alpha,))

        return fade

    def paint(self, backdrop: Image.Image, layer: Layer) -> Image.Image:
        """
        Paint a layer onto the backdrop.

        Offsets may be negative or run past the backdrop edges; the layer is
        clipped to the backdrop. The layer's own alpha decides how much of
        the backdrop shows through.

        Returns:
            New RGBA image, the backdrop is left untouched
        """
        if layer.blend not in BLEND_MODES:
            raise ValueError(f"Unsupported blend mode: {layer.blend}")

        image = layer.image
        left, top = layer.offset

        # Align the layer with the backdrop
        if left < 0:
            if image.width <= -left:
                return backdrop.copy()
            image = image.crop((-left, 0, image.width, image.height))
            left = 0
        if top < 0:
            if image.height <= -top:
                return backdrop.copy()
            image = image.crop((0, -top, image.width, image.height))
            top = 0

        aligned = Image.new("RGBA", backdrop.size, (0, 0, 0, 0))
        aligned.paste(image.convert("RGBA"), (left, top))

        if backdrop.mode != "RGBA":
            backdrop = backdrop.convert("RGBA")

        if layer.blend != "over":
            aligned = self._blend_colors(backdrop, aligned, layer.blend)

        return Image.alpha_composite(backdrop, aligned)

    def _blend_colors(self, backdrop: Image.Image, source: Image.Image, mode: str) -> Image.Image:
        """Mix source colors with the backdrop, keeping the source alpha."""
        backdrop_rgb = backdrop.convert("RGB")
        source_rgb = source.convert("RGB")

        if mode == "multiply":
            mixed = ImageChops.multiply(backdrop_rgb, source_rgb)
        else:
            mixed = ImageChops.screen(backdrop_rgb, source_rgb)

        mixed.putalpha(source.getchannel("A"))
        return mixed

    def render(self, frame_size: Tuple[int, int], layers: list) -> Image.Image:
        """
        Paint layers in order onto a transparent frame.

        Later layers overlay earlier ones where they intersect.
        """
        canvas = Image.new("RGBA", frame_size, (0, 0, 0, 0))
        for layer in layers:
            canvas = self.paint(canvas, layer)
        return canvas

    def export_png(self, image: Image.Image) -> bytes:
        """
        Encode poster as PNG bytes.

        Raises:
            EncodingFailed: If Pillow cannot encode the image
        """
        buffer = io.BytesIO()
        try:
            image.save(buffer, format="PNG")
        except (OSError, ValueError) as e:
            raise EncodingFailed(f"PNG encoding failed: {e}")
        return buffer.getvalue()
