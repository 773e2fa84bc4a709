"""
FastAPI dependencies for authentication.

``get_current_user_id`` is the gate in front of every protected route: it
runs before the handler and either short-circuits the request or records the
caller's identity on ``request.state.user_id``.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Header, Request

from auth.jwt import TokenService
from core.errors import Forbidden, InvalidToken, Unauthorized

logger = logging.getLogger(__name__)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def _extract_token(authorization: Optional[str]) -> str:
    """The header carries the raw token; a ``Bearer`` scheme is tolerated."""
    token = (authorization or "").strip()
    if token[:7].lower() == "bearer ":
        token = token[7:].strip()
    return token


async def get_current_user_id(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> str:
    """
    Verify the token from the Authorization header and return the
    authenticated ``user_id`` (UUID string).

    Missing token → ``Forbidden`` (403). Rejected token → ``Unauthorized`` (401).
    """
    token = _extract_token(authorization)
    if not token:
        logger.warning("Protected request without token: %s %s", request.method, request.url.path)
        raise Forbidden("Token is not provided")

    try:
        user_id = get_token_service(request).verify(token)
    except InvalidToken as exc:
        logger.warning("Rejected token on %s: %s", request.url.path, exc)
        raise Unauthorized("Unauthorized access") from exc

    request.state.user_id = user_id
    return user_id
