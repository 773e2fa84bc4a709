"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

import asyncio
import secrets

import bcrypt

# bcrypt only looks at the first 72 bytes and recent releases refuse longer input.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password with bcrypt (auto-salted)."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False


class PasswordHasher:
    """
    Async facade over bcrypt.

    bcrypt is deliberately slow, so both operations run in a worker thread
    via ``asyncio.to_thread()`` and never block the event loop.
    """

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds
        # Checked against when the account does not exist, so a login for an
        # unknown email costs the same single bcrypt check as a wrong password.
        self.dummy_hash = hash_password(secrets.token_urlsafe(16), rounds)

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(hash_password, password, self.rounds)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(verify_password, password, password_hash)
