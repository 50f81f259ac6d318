"""
Poster API models for FastAPI endpoints.

Field aliases keep the camelCase JSON shape the booth frontend expects.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Any


class UploadResponse(BaseModel):
    """Response from a successful selfie upload."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    theme: str
    image_url: str = Field(alias="imageUrl")
    file_name: str = Field(alias="fileName")
    qr_data_url: Optional[str] = Field(default=None, alias="qrDataUrl")
    email_sent: bool = Field(default=False, alias="emailSent")
    whatsapp_sent: bool = Field(default=False, alias="whatsappSent")


class ErrorResponse(BaseModel):
    """Structured failure response."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = False
    error: str
    error_type: Optional[str] = Field(default=None, alias="errorType")
    details: Dict[str, Any] = Field(default_factory=dict)


class ThemeOptionsResponse(BaseModel):
    """Response with available poster themes."""
    themes: List[dict]
    default: str
