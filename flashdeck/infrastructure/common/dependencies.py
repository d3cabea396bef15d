"""FastAPI dependencies shared by the routers."""

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import structlog
from fastapi import HTTPException, status

from flashdeck.config import get_settings
from flashdeck.constants import DEFAULT_USER_ID
from flashdeck.domain.common.value_objects import UserId

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def get_current_user_id() -> UserId:
    """Resolve the acting user. Every request runs as the single default user."""
    return UserId(DEFAULT_USER_ID)


def require_ai_enabled(func: F) -> F:
    """
    Reject calls to an AI endpoint with 410 Gone when no AI provider is configured.

    Usage:
        @router.post("/decks/{deck_id}/generations")
        @require_ai_enabled
        async def generate_flashcards(...):
            ...
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
        if not get_settings().ai_enabled:
            logger.info("ai_endpoint_called_while_disabled", endpoint=func.__name__)
            raise HTTPException(
                status_code=status.HTTP_410_GONE,
                detail="AI flashcard generation is not enabled on this server",
            )
        return await func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
