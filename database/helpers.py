"""
Database helper functions — the ``users`` store.

Create, find-by-username and find-by-id against the ``users`` table.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User

logger = logging.getLogger(__name__)


class UsernameTakenError(Exception):
    """Raised when the unique constraint on ``users.username`` rejects an insert."""

    def __init__(self, username: str) -> None:
        super().__init__(f"username {username!r} already exists")
        self.username = username


async def find_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalars().first()


async def find_user_by_id(session: AsyncSession, user_id: int) -> Optional[User]:
    return await session.get(User, user_id)


async def create_user(session: AsyncSession, username: str, password_hash: str) -> User:
    """
    Insert a user and return the stored row (``id`` populated).

    A concurrent registration that slipped past the existence check trips
    the unique constraint; that surfaces as ``UsernameTakenError``.
    """
    user = User(username=username, password=password_hash)
    session.add(user)
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        logger.info("Duplicate username rejected by constraint: %s", username)
        raise UsernameTakenError(username) from exc

    stored = await find_user_by_id(session, user.id)
    return stored if stored is not None else user
