"""
Auth API routes — register, login.

Route prefix: /api/auth
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import CREDENTIALS_REQUIRED, ApiError
from auth.dependencies import db_session
from auth.jwt import create_token
from auth.password import hash_password, verify_password
from database.helpers import UsernameTakenError, create_user, find_user_by_username

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class Credentials(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

    def require(self) -> "Credentials":
        if not self.username or not self.password:
            raise ApiError(status.HTTP_400_BAD_REQUEST, CREDENTIALS_REQUIRED)
        return self


class UserRecord(BaseModel):
    id: int
    username: str
    password: str


class LoginResponse(BaseModel):
    message: str
    token: str


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post(
    "/register",
    response_model=UserRecord,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: Credentials,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user and return the stored record."""
    creds = req.require()

    if await find_user_by_username(session, creds.username) is not None:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "username taken")

    try:
        user = await create_user(session, creds.username, hash_password(creds.password))
    except UsernameTakenError:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "username taken")

    await session.commit()

    logger.info("Registered user %s (%s)", user.username, user.id)
    return user.to_dict()


@router.post("/login", response_model=LoginResponse)
async def login(
    req: Credentials,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Login with username + password."""
    creds = req.require()

    user = await find_user_by_username(session, creds.username)
    if user is None or not verify_password(creds.password, user.password):
        logger.info("Failed login for %s", creds.username)
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "invalid credentials")

    token = create_token(user.id, user.username)
    logger.info("Login: %s (%s)", user.username, user.id)

    return {
        "message": f"welcome, {user.username}",
        "token": token,
    }
