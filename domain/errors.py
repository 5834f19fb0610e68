"""Typed failures returned by the backend boundary (see services.backend)."""
from typing import Optional


class CamsError(Exception):
    """Base class for errors surfaced to a screen as an inline message."""

    default_code = "error"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __repr__(self):
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class AuthError(CamsError):
    default_code = "auth_failed"


class ImageryError(CamsError):
    default_code = "imagery_failed"
