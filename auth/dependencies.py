"""
FastAPI dependencies for authentication.

Provides ``db_session`` and the ``restricted`` gate used by every
protected route.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import Depends, Header, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import ApiError
from auth.jwt import verify_token
from database.session import get_db_session

logger = logging.getLogger(__name__)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


async def restricted(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> Dict[str, Any]:
    """
    Verify the raw token in the ``Authorization`` header (no ``Bearer``
    prefix) and return its claims.

    The claims are also stored on ``request.state.decoded_jwt``.
    """
    if not authorization:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "token required")

    check = verify_token(authorization)
    if not check.ok:
        logger.info("Rejected token on %s: %s", request.url.path, check.reason)
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "token invalid")

    request.state.decoded_jwt = check.claims
    return check.claims
