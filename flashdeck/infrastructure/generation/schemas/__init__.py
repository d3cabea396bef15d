"""Schemas for the generation API."""

from flashdeck.infrastructure.generation.schemas.generation_schemas import (
    FlashcardProposalSchema,
    GenerateFlashcardsRequest,
    GenerateFlashcardsResponse,
)

__all__ = [
    "FlashcardProposalSchema",
    "GenerateFlashcardsRequest",
    "GenerateFlashcardsResponse",
]
