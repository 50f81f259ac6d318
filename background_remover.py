"""
BackgroundRemover - remove.bg API client.

Sends the uploaded selfie to remove.bg and returns the cut-out subject as
PNG bytes with a transparent background.
"""

import logging
from typing import Optional

import httpx

from poster.errors import RemovalFailed
from settings import Settings

logger = logging.getLogger(__name__)


class BackgroundRemover:
    """
    Client for the remove.bg background removal API.

    The remote call is a hard dependency of poster composition: any failure
    is raised as RemovalFailed and never papered over.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the client.

        Args:
            settings: Service settings (API key, endpoint, timeout)
            transport: Optional httpx transport, mainly for tests
        """
        self.api_key = settings.remove_bg_api_key
        self.api_url = settings.remove_bg_url
        self.timeout = settings.remove_bg_timeout
        self.transport = transport

        if not self.api_key:
            logger.warning("REMOVE_BG_API_KEY not set - background removal will fail")

    async def remove_background(self, image_bytes: bytes, filename: str = "selfie.jpg") -> bytes:
        """
        Remove the background from an image.

        Args:
            image_bytes: Raw uploaded image
            filename: Original upload name, forwarded to the API

        Returns:
            PNG bytes of the subject on a transparent background

        Raises:
            RemovalFailed: On missing configuration, transport errors,
                non-2xx responses or an empty result
        """
        if not self.api_key:
            raise RemovalFailed("Background removal API key is not configured")

        logger.info(f"Removing background ({len(image_bytes)} bytes)...")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    headers={"X-Api-Key": self.api_key},
                    files={"image_file": (filename, image_bytes)},
                    data={"size": "auto"},
                )
        except httpx.HTTPError as e:
            logger.error(f"remove.bg transport error: {e}")
            raise RemovalFailed(f"Background removal request failed: {e}")

        if not response.is_success:
            logger.error(f"remove.bg failed ({response.status_code}): {response.text[:300]}")
            raise RemovalFailed(
                f"Background removal API failed with status {response.status_code}",
                http_status=response.status_code,
            )

        if not response.content:
            raise RemovalFailed(
                "Background removal API returned an empty image",
                http_status=response.status_code,
            )

        logger.info("Background removed successfully")
        return response.content
