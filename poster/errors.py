"""
Error taxonomy for poster composition.

Every failure that can stop a poster from being produced is one of these.
They carry an HTTP status so the API layer can turn them into a structured
failure response without guessing.
"""

from typing import Optional, Dict, Any


class PosterError(Exception):
    """Base exception for the poster pipeline."""

    error_type = "PosterError"

    def __init__(
        self,
        message: str,
        code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "errorType": self.error_type,
            "details": self.details,
        }


class AssetMissing(PosterError):
    """Raised when a template or decorative asset does not exist."""

    error_type = "AssetMissing"

    def __init__(self, name: str, **kwargs):
        super().__init__(f"Asset not found: {name}", code=500, **kwargs)
        self.details["asset"] = name


class RemovalFailed(PosterError):
    """Raised when the background removal API call does not succeed."""

    error_type = "RemovalFailed"

    def __init__(self, message: str, http_status: Optional[int] = None, **kwargs):
        super().__init__(message, code=502, **kwargs)
        self.details["service"] = "remove.bg"
        self.details["http_status"] = http_status


class EncodingFailed(PosterError):
    """Raised when an image cannot be decoded or encoded."""

    error_type = "EncodingFailed"

    def __init__(self, message: str, **kwargs):
        super().__init__(message, code=422, **kwargs)


class IOFailure(PosterError):
    """Raised on disk read/write errors."""

    error_type = "IOFailure"

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, code=500, **kwargs)
        if path:
            self.details["path"] = path
