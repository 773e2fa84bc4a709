"""
REST API routes for the authenticated user's wishlist.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import db_session, get_current_user_id
from database.helpers import (
    create_wishlist_item,
    delete_wishlist_item,
    list_wishlist_items,
)
from utils.schemas import DeleteResponse, WishlistItemCreate, WishlistItemResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, str]:
    return {"status": "ok"}


# ── Wishlist (scoped to the token's user) ───────────────────────────────


@router.get("/wishlists", response_model=List[WishlistItemResponse])
async def get_wishlist(
    session: AsyncSession = Depends(db_session),
    auth_user_id: str = Depends(get_current_user_id),
) -> List[WishlistItemResponse]:
    items = await list_wishlist_items(session, auth_user_id)
    return [WishlistItemResponse.model_validate(item) for item in items]


@router.post(
    "/wishlists",
    response_model=WishlistItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_wishlist_item(
    payload: WishlistItemCreate,
    session: AsyncSession = Depends(db_session),
    auth_user_id: str = Depends(get_current_user_id),
) -> WishlistItemResponse:
    item = await create_wishlist_item(
        session,
        auth_user_id,
        payload.name,
        payload.description,
    )
    return WishlistItemResponse.model_validate(item)


@router.delete("/wishlists/{item_id}", response_model=DeleteResponse)
async def remove_wishlist_item(
    item_id: str,
    session: AsyncSession = Depends(db_session),
    auth_user_id: str = Depends(get_current_user_id),
) -> Dict[str, Any]:
    """
    Delete one of the caller's items.

    Always 200: a miss (unknown id or someone else's item) is reported in the
    body with ``deleted: false`` rather than as an error status.
    """
    deleted = await delete_wishlist_item(session, item_id, auth_user_id)
    if not deleted:
        return {"deleted": False, "message": "Wishlist item not found"}
    return {"deleted": True, "message": "Wishlist item deleted successfully"}
