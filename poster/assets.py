"""
AssetStore - read-only access to the images bundled with the deployment.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from .errors import AssetMissing, IOFailure
from .renderer import PosterRenderer

logger = logging.getLogger(__name__)


class AssetStore:
    """
    Looks up template and decorative images by filename.

    Names are resolved relative to the assets directory; anything that would
    escape it is reported as missing.
    """

    def __init__(self, assets_dir: Union[str, Path], renderer: Optional[PosterRenderer] = None):
        self.assets_dir = Path(assets_dir).resolve()
        self.renderer = renderer or PosterRenderer()

        if not self.assets_dir.is_dir():
            logger.warning(f"Assets directory does not exist: {self.assets_dir}")

    def _path(self, name: str) -> Optional[Path]:
        path = (self.assets_dir / name).resolve()
        if self.assets_dir not in path.parents:
            return None
        return path

    def exists(self, name: str) -> bool:
        path = self._path(name)
        return path is not None and path.is_file()

    def get_asset(self, name: str) -> bytes:
        """
        Read an asset's raw bytes.

        Raises:
            AssetMissing: If no such asset exists
            IOFailure: If the file exists but cannot be read
        """
        if not self.exists(name):
            raise AssetMissing(name)

        path = self._path(name)
        try:
            return path.read_bytes()
        except OSError as e:
            raise IOFailure(f"Failed to read asset {name}: {e}", path=str(path))

    def open_image(self, name: str) -> Image.Image:
        """Load an asset as an RGBA image."""
        return self.renderer.load_image(self.get_asset(name), label=f"asset {name}")
