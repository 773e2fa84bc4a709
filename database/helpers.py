"""
Database helper functions — credential store and scoped wishlist store.

Every function takes the request's ``AsyncSession``. Writes commit before
returning so the caller's response always reflects persisted state.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import DuplicateEmail, NotFound, StoreError, ValidationError
from database.models import User, WishlistItem

logger = logging.getLogger(__name__)



def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value


def normalize_email(email: str) -> str:
    return email.strip().lower()


# ── Credential store ────────────────────────────────────────────────


async def create_user(
    session: AsyncSession,
    email: str,
    password_hash: str,
) -> str:
    """
    Persist a new user and return its ``user_id``.

    Email uniqueness is enforced by the ``users.email`` unique index, so two
    concurrent signups for the same address cannot both succeed.
    """
    user = User(
        user_id=uuid.uuid4(),
        email=normalize_email(email),
        password_hash=password_hash,
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise DuplicateEmail("Email already registered") from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("create_user failed")
        raise StoreError("Error creating user") from exc
    return str(user.user_id)


async def find_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    try:
        result = await session.execute(
            select(User).where(User.email == normalize_email(email))
        )
    except SQLAlchemyError as exc:
        logger.exception("find_user_by_email failed")
        raise StoreError("Error logging in") from exc
    return result.scalar_one_or_none()


# ── Wishlist store (always scoped by owner) ─────────────────────────


async def list_wishlist_items(
    session: AsyncSession,
    owner_id: str,
) -> List[WishlistItem]:
    """Return the owner's items in insertion order (empty list if none)."""
    uid = _to_uuid(owner_id)
    try:
        result = await session.execute(
            select(WishlistItem)
            .where(WishlistItem.user_id == uid)
            .order_by(WishlistItem.created_at.asc())
        )
    except SQLAlchemyError as exc:
        logger.exception("list_wishlist_items failed for owner %s", owner_id)
        raise StoreError("Error retrieving wishlist") from exc
    return list(result.scalars().all())


async def create_wishlist_item(
    session: AsyncSession,
    owner_id: str,
    name: Optional[str],
    description: Optional[str] = None,
) -> WishlistItem:
    if name is None or not name.strip():
        raise ValidationError("Wishlist item name is required")

    uid = _to_uuid(owner_id)
    try:
        owner = await session.get(User, uid)
        if owner is None:
            raise NotFound("User not found")

        item = WishlistItem(
            item_id=uuid.uuid4(),
            user_id=uid,
            name=name.strip(),
            description=description,
        )
        session.add(item)
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("create_wishlist_item failed for owner %s", owner_id)
        raise StoreError("Error creating wishlist item") from exc

    logger.info("Created wishlist item %s for owner %s", item.item_id, owner_id)
    return item


async def delete_wishlist_item(
    session: AsyncSession,
    item_id: str,
    owner_id: str,
) -> bool:
    """
    Delete ``item_id`` only if it belongs to ``owner_id``.

    Returns False for unknown, malformed, or foreign ids, so callers cannot
    tell another user's item apart from one that never existed.
    """
    try:
        iid = _to_uuid(item_id)
    except ValueError:
        return False

    uid = _to_uuid(owner_id)
    try:
        result = await session.execute(
            delete(WishlistItem).where(
                WishlistItem.item_id == iid,
                WishlistItem.user_id == uid,
            )
        )
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("delete_wishlist_item failed for owner %s", owner_id)
        raise StoreError("Error deleting wishlist item") from exc

    deleted = result.rowcount == 1
    if deleted:
        logger.info("Deleted wishlist item %s for owner %s", item_id, owner_id)
    return deleted
