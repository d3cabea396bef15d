"""Common value objects shared across all domain modules."""

from .content_hash import ContentHash
from .ids import DeckId, GenerationId, UserId

__all__ = [
    "ContentHash",
    "DeckId",
    "GenerationId",
    "UserId",
]
