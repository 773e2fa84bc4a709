"""
JWT token creation and verification.

Tokens are HS256-signed JWTs carrying ``user_id`` and ``iat`` (plus ``exp``
when an expiry is configured). The secret comes from ``Settings.jwt_secret``
(env var: ``JWT_SECRET``) and is handed in at construction.
"""

from __future__ import annotations

import time
import uuid

import jwt

from core.errors import InvalidToken


class TokenService:
    """Issue and verify stateless identity tokens."""

    def __init__(
        self,
        secret: str,
        expiry_seconds: int = 0,
        algorithm: str = "HS256",
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._expiry_seconds = expiry_seconds
        self._algorithm = algorithm

    def issue(self, user_id: str) -> str:
        """Create a signed token bound to ``user_id``."""
        now = int(time.time())
        payload = {"user_id": str(user_id), "iat": now}
        if self._expiry_seconds > 0:
            payload["exp"] = now + self._expiry_seconds
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Verify token and return ``user_id``.

        Raises ``InvalidToken`` on bad signature, malformed structure, wrong
        secret, expiry, or a missing / non-UUID ``user_id`` claim.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["user_id"]},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidToken(str(exc)) from exc

        user_id = payload["user_id"]
        try:
            return str(uuid.UUID(str(user_id)))
        except ValueError as exc:
            raise InvalidToken("user_id claim is not a valid id") from exc
