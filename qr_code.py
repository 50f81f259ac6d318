"""
QR code generation for poster links.
"""

import base64
import io
import logging

import qrcode
from qrcode.image.pil import PilImage

logger = logging.getLogger(__name__)


def make_qr_png(url: str, box_size: int = 10, border: int = 4) -> bytes:
    """Render a QR code encoding ``url`` as PNG bytes."""
    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(url)
    qr.make(fit=True)

    image = qr.make_image(image_factory=PilImage, fill_color="black", back_color="white")
    buffer = io.BytesIO()
    image.save(buffer)
    return buffer.getvalue()


def make_qr_data_url(url: str) -> str:
    """
    Encode a URL as a QR code data URL.

    Examples:
        >>> make_qr_data_url("http://localhost/public/x.png")[:22]
        'data:image/png;base64,'
    """
    encoded = base64.b64encode(make_qr_png(url)).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def decode_data_url(data_url: str) -> bytes:
    """Extract the raw bytes of a base64 data URL."""
    _, _, payload = data_url.partition(",")
    return base64.b64decode(payload)
