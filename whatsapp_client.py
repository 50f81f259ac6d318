"""
WhatsAppClient - sends the poster link through the WhatsApp Cloud API.
"""

import logging
from typing import Optional

import httpx

from settings import Settings

logger = logging.getLogger(__name__)


class WhatsAppClient:
    """Graph API client for image messages."""

    base_url = "https://graph.facebook.com"

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.token = settings.whatsapp_token
        self.phone_id = settings.whatsapp_phone_id
        self.api_version = settings.whatsapp_api_version
        self.caption = settings.whatsapp_caption
        self.transport = transport

    def is_configured(self) -> bool:
        return bool(self.token and self.phone_id)

    @property
    def messages_url(self) -> str:
        return f"{self.base_url}/{self.api_version}/{self.phone_id}/messages"

    async def send_image(self, phone_number: str, image_url: str) -> bool:
        """
        Send the poster as an image message.

        Args:
            phone_number: Recipient including country code, e.g. "919876543210"
            image_url: Public poster URL

        Returns:
            True on success, False (logged) otherwise
        """
        if not self.is_configured():
            logger.warning("WHATSAPP_TOKEN/WHATSAPP_PHONE_ID not set - skipping WhatsApp send")
            return False

        payload = {
            "messaging_product": "whatsapp",
            "to": phone_number,
            "type": "image",
            "image": {
                "link": image_url,
                "caption": self.caption,
            },
        }

        try:
            async with httpx.AsyncClient(timeout=30.0, transport=self.transport) as client:
                response = await client.post(
                    self.messages_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.token}"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"WhatsApp send error ({e.response.status_code}): {e.response.text[:300]}")
            return False
        except httpx.HTTPError as e:
            logger.error(f"WhatsApp send error: {e}")
            return False

        logger.info(f"WhatsApp message sent to {phone_number}: {response.text[:200]}")
        return True
