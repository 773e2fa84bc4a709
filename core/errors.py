"""
Error hierarchy for the wishlist service.

Every error carries a short client-safe ``message``, a machine ``code`` and the
HTTP status the API layer maps it to. Persistence failures never carry
driver detail in ``message``; that only goes to the log.
"""

from __future__ import annotations


class WishlistError(Exception):
    """Base exception for all wishlist service errors."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class ValidationError(WishlistError):
    """A required field is missing or blank."""

    code = "VALIDATION_ERROR"
    http_status = 400


class DuplicateEmail(WishlistError):
    code = "DUPLICATE_EMAIL"
    http_status = 409


class AuthError(WishlistError):
    """Bad credentials at login."""

    code = "INVALID_CREDENTIALS"
    http_status = 401


class Forbidden(WishlistError):
    """No token on a protected request."""

    code = "TOKEN_MISSING"
    http_status = 403


class Unauthorized(WishlistError):
    """Token present but rejected by the verifier."""

    code = "UNAUTHORIZED"
    http_status = 401


class NotFound(WishlistError):
    code = "NOT_FOUND"
    http_status = 404


class StoreError(WishlistError):
    """Underlying persistence failure."""

    code = "STORE_ERROR"
    http_status = 500


class InvalidToken(Exception):
    """Raised by the token verifier; the auth gate turns it into ``Unauthorized``."""
