"""Diagnostics Routes — registry reset and an artificial 500 for client testing.

Invariants:
    - GET /restart restores the seed snapshot and always returns 200
    - GET /error always returns 500, whatever the query string holds
    - Neither route is rate limited (only /users is)
"""

import logging

from fastapi import APIRouter, Depends, status

from users_api.api.dependencies import get_registry
from users_api.core.domain_types import UserMessage
from users_api.core.errors import ArtificialError
from users_api.core.user_registry import UserRegistry
from users_api.schemas.user import MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Diagnostics"])


@router.get(
    "/restart", response_model=MessageResponse,
    summary="Reset database",
    responses={status.HTTP_200_OK: {"description": "The DB was restart"}},
)
async def restart(registry: UserRegistry = Depends(get_registry)):
    registry.reset()
    logger.info(f"Registry reset to {len(registry)} seed users")
    return {"message": UserMessage.RESET_DONE.value}


@router.get(
    "/error",
    summary="Always fails, so clients can see a 500 on demand",
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": MessageResponse, "description": "Artificial error",
        },
    },
)
async def error_probe():
    raise ArtificialError()
