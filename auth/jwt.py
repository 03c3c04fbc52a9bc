"""
JWT token creation and verification.

Tokens are HS256-signed JWTs carrying ``userId``, ``username``, ``iat`` and
``exp``. Secret, algorithm and lifetime come from ``config``
(env vars: ``JWT_SECRET``, ``JWT_ALGORITHM``, ``JWT_EXPIRY_SECONDS``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from config.settings import Settings, config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenCheck:
    """Outcome of ``verify_token``: either ``claims`` or a rejection ``reason``."""

    claims: Optional[Dict[str, Any]] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.claims is not None


def create_token(
    user_id: int,
    username: str,
    settings: Settings = config,
    now: Optional[datetime] = None,
) -> str:
    """Sign a token for ``user_id`` / ``username`` expiring after ``jwt_expiry_seconds``."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=settings.jwt_expiry_seconds),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: Settings = config) -> TokenCheck:
    """Check signature and expiry; never raises for a bad token."""
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        return TokenCheck(reason="token expired")
    except jwt.InvalidTokenError as exc:
        logger.debug("Token rejected: %s", exc)
        return TokenCheck(reason=str(exc) or "invalid token")
    return TokenCheck(claims=claims)
