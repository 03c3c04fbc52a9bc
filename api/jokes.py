"""
Jokes API routes — the resource behind the token gate.

Route prefix: /api/jokes
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from auth.dependencies import restricted

logger = logging.getLogger(__name__)

router = APIRouter(tags=["jokes"])

_JOKES: List[Dict[str, str]] = [
    {
        "id": "0189hNRf2g",
        "joke": "I'm tired of following my dreams. I'm just going to ask them "
        "where they are going and meet up with them later.",
    },
    {
        "id": "08EQZ8EQukb",
        "joke": "Did you hear about the guy whose whole left side was cut off? "
        "He's all right now.",
    },
    {
        "id": "08xHQCdx5Ed",
        "joke": "Why didn't the skeleton cross the road? Because he had no guts.",
    },
]


def get_jokes() -> List[Dict[str, str]]:
    return [dict(joke) for joke in _JOKES]


@router.get("")
async def list_jokes(claims: Dict[str, Any] = Depends(restricted)) -> List[Dict[str, str]]:
    """Return every joke to an authenticated caller."""
    logger.debug("Jokes requested by %s", claims.get("username"))
    return get_jokes()
