import io
import os
import tempfile
from pathlib import Path

import pytest
from PIL import Image

# main.py mounts the public directory at import time
os.environ.setdefault("PUBLIC_DIR", tempfile.mkdtemp(prefix="selfie-booth-public-"))

from poster import AssetStore, PosterComposer, PosterStore, SelfieBooth
from poster.errors import RemovalFailed

# Solid colors make it easy to tell which background ended up on the poster
BACKGROUND_COLORS = {
    "bg_professional.jpg": (200, 30, 30),
    "bg_artistic.jpeg": (30, 30, 200),
    "bg_superhero.jpg": (230, 200, 20),
    "bg_doctor.jpeg": (20, 160, 160),
    "bg.png": (30, 180, 30),
}
SUBJECT_COLOR = (255, 0, 255, 255)


def png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def make_subject(width: int = 600, height: int = 900) -> bytes:
    return png_bytes(Image.new("RGBA", (width, height), SUBJECT_COLOR))


def color_close(actual, expected, tolerance: int = 8) -> bool:
    return all(abs(a - e) <= tolerance for a, e in zip(actual, expected))


def write_assets(directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)

    for name, color in BACKGROUND_COLORS.items():
        image = Image.new("RGB", (1600, 1200), color)
        fmt = "PNG" if name.endswith(".png") else "JPEG"
        image.save(directory / name, format=fmt, quality=95)

    # Semi-transparent accent wider than the frame
    Image.new("RGBA", (1200, 600), (0, 90, 255, 180)).save(directory / "blue.png")
    Image.new("RGBA", (1400, 280), (255, 255, 255, 255)).save(directory / "evolveLogo.png")
    Image.new("RGBA", (300, 400), (0, 120, 0, 255)).save(directory / "babyTree.png")
    return directory


class FakeRemover:
    """Stands in for remove.bg: returns the upload unchanged or fails."""

    def __init__(self, fail_status=None):
        self.fail_status = fail_status
        self.calls = []

    async def remove_background(self, image_bytes, filename="selfie.jpg"):
        self.calls.append(filename)
        if self.fail_status:
            raise RemovalFailed(
                f"Background removal API failed with status {self.fail_status}",
                http_status=self.fail_status,
            )
        return image_bytes


@pytest.fixture
def assets_dir(tmp_path):
    return write_assets(tmp_path / "assets")


@pytest.fixture
def asset_store(assets_dir):
    return AssetStore(assets_dir)


@pytest.fixture
def composer(asset_store):
    return PosterComposer(asset_store)


@pytest.fixture
def public_dir(tmp_path):
    return tmp_path / "public"


@pytest.fixture
def remover():
    return FakeRemover()


@pytest.fixture
def booth(remover, composer, public_dir):
    return SelfieBooth(remover, composer, PosterStore(public_dir, prefix="EVOLVE"))
