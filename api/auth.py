"""
Authentication — signup and login.

Passwords are stored as bcrypt digests; login returns a signed token that
the client sends back verbatim in the ``Authorization`` header.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import db_session, get_password_hasher, get_token_service
from auth.jwt import TokenService
from auth.password import PasswordHasher
from core.errors import AuthError, DuplicateEmail, StoreError
from database.helpers import create_user, find_user_by_email
from utils.schemas import LoginRequest, MessageResponse, SignupRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    req: SignupRequest,
    session: AsyncSession = Depends(db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> Dict[str, Any]:
    """Register a new user."""
    password_hash = await hasher.hash(req.password)
    try:
        user_id = await create_user(session, req.email, password_hash)
    except DuplicateEmail as exc:
        # Duplicates are reported like any other store failure on this route.
        logger.warning("Signup rejected, email already registered: %s", req.email)
        raise StoreError("Error creating user") from exc

    logger.info("Registered user %s", user_id)
    return {"message": "User created successfully"}


@router.post("/login", response_model=TokenResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """Login with email + password."""
    user = await find_user_by_email(session, req.email)

    password_hash = user.password_hash if user is not None else hasher.dummy_hash
    password_ok = await hasher.verify(req.password, password_hash)

    if user is None or not password_ok:
        logger.info("Failed login for %s", req.email)
        raise AuthError("Invalid email or password")

    token = tokens.issue(str(user.user_id))
    logger.info("Login: %s", user.user_id)
    return {"token": token}
