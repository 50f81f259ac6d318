"""
Service configuration.

All values come from environment variables (or a local .env file) and are
passed explicitly into the services that need them.
"""

from typing import Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # remove.bg
    remove_bg_api_key: Optional[str] = None
    remove_bg_url: str = "https://api.remove.bg/v1.0/removebg"
    remove_bg_timeout: float = 60.0

    # Poster assets and output
    assets_dir: str = "assets"
    public_dir: str = "public"
    output_prefix: str = "EVOLVE"
    default_theme: str = "professional"

    # Email (Gmail app password by default)
    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    email_sender_name: str = "AI Selfie Booth"

    # WhatsApp Cloud API
    whatsapp_token: Optional[str] = None
    whatsapp_phone_id: Optional[str] = None
    whatsapp_api_version: str = "v17.0"
    whatsapp_caption: str = "Your AI Selfie is ready! 📸"

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    model_config = ConfigDict(env_file=".env", extra="ignore")
