"""
SelfieBooth - per-request pipeline from uploaded selfie to saved poster.

Workflow:
1. Check the upload decodes (before spending an API call on it)
2. Remove the background (remote)
3. Composite the poster (CPU, in a worker thread)
4. Write the PNG into the public directory

The outcome is always a CompositionResult, so callers can tell a processed
poster from a failure without inspecting files.
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .composer import PosterComposer
from .errors import PosterError
from .renderer import PosterRenderer
from .storage import PosterStore
from .themes import theme_slug

logger = logging.getLogger(__name__)


@dataclass
class CompositionResult:
    """Outcome of one composition request."""
    success: bool
    theme: str
    output_path: Optional[Path] = None
    error: Optional[PosterError] = None

    @classmethod
    def ok(cls, theme: str, output_path: Path) -> "CompositionResult":
        return cls(success=True, theme=theme, output_path=output_path)

    @classmethod
    def failed(cls, theme: str, error: PosterError) -> "CompositionResult":
        return cls(success=False, theme=theme, error=error)

    @property
    def file_name(self) -> Optional[str]:
        return self.output_path.name if self.output_path else None


class SelfieBooth:
    """Runs the full selfie-to-poster pipeline for one upload at a time."""

    def __init__(self, remover, composer: PosterComposer, store: PosterStore):
        """
        Args:
            remover: Object with ``async remove_background(bytes, filename) -> bytes``
            composer: Poster compositor
            store: Output writer
        """
        self.remover = remover
        self.composer = composer
        self.store = store

    @property
    def renderer(self) -> PosterRenderer:
        return self.composer.renderer

    async def process(
        self,
        image_bytes: bytes,
        theme: str,
        filename: str = "selfie.jpg"
    ) -> CompositionResult:
        """
        Turn an uploaded selfie into a saved poster.

        Args:
            image_bytes: Uploaded image (any format Pillow reads)
            theme: Theme key
            filename: Original upload name

        Returns:
            CompositionResult; failures carry the PosterError that stopped
            the pipeline
        """
        try:
            # Step 1: Reject undecodable uploads early
            await asyncio.to_thread(self.renderer.load_image, image_bytes, "uploaded image")

            # Step 2: Remote background removal
            cutout = await self.remover.remove_background(image_bytes, filename)

            # Step 3: Composite
            png_bytes = await asyncio.to_thread(self.composer.compose, cutout, theme)

            # Step 4: Save
            output_path = await asyncio.to_thread(self.store.save, png_bytes, theme_slug(theme))

        except PosterError as e:
            logger.error(f"Poster generation failed ({e.error_type}): {e.message}")
            return CompositionResult.failed(theme, e)

        logger.info(f"Poster ready: {output_path.name}")
        return CompositionResult.ok(theme, output_path)
