"""
Output storage for finished posters.

Posters are written once into the public directory and never modified.
"""

import logging
import time
from pathlib import Path
from typing import Callable, Union

from .errors import IOFailure

logger = logging.getLogger(__name__)


class PosterStore:
    """Writes posters as ``<PREFIX>_<theme>_<timestamp>.png`` into a public directory."""

    def __init__(
        self,
        public_dir: Union[str, Path],
        prefix: str = "EVOLVE",
        clock: Callable[[], float] = time.time
    ):
        self.public_dir = Path(public_dir)
        self.prefix = prefix
        self.clock = clock

    def filename_for(self, theme: str, timestamp_ms: int) -> str:
        return f"{self.prefix}_{theme}_{timestamp_ms}.png"

    def save(self, png_bytes: bytes, theme: str) -> Path:
        """
        Write a poster to the public directory.

        Files are created exclusively; if the name is already taken the
        timestamp is bumped until a free name is found.

        Args:
            png_bytes: Encoded poster
            theme: Filename-safe theme key

        Returns:
            Path of the written file

        Raises:
            IOFailure: If the directory or file cannot be written
        """
        try:
            self.public_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailure(f"Cannot create output directory: {e}", path=str(self.public_dir))

        timestamp = int(self.clock() * 1000)
        while True:
            path = self.public_dir / self.filename_for(theme, timestamp)
            try:
                with open(path, "xb") as f:
                    f.write(png_bytes)
                break
            except FileExistsError:
                timestamp += 1
            except OSError as e:
                # Never leave a truncated poster behind
                path.unlink(missing_ok=True)
                raise IOFailure(f"Failed to write poster: {e}", path=str(path))

        logger.info(f"Saved poster to {path}")
        return path
