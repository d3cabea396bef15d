"""Pydantic schemas for flashcard generation API request/response validation."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from flashdeck.domain.generation.enums import FlashcardKind, FlashcardSource


class GenerateFlashcardsRequest(BaseModel):
    """Schema for a flashcard generation request."""

    # Types and bounds are checked by the input validator so that they map to 400
    text: Any = Field(default=None, description="Source text, 1000 to 10000 characters")
    count: Any = Field(
        default=None,
        description="Number of flashcards to generate (1-100), derived from the text length if omitted",
    )


class FlashcardProposalSchema(BaseModel):
    """Schema for one unaccepted flashcard proposal."""

    type: FlashcardKind
    front: str
    back: str
    source: FlashcardSource
    generation_id: str | None
    deck_id: str
    is_accepted: bool


class GenerateFlashcardsResponse(BaseModel):
    """Schema for the generation response."""

    generation_id: str = Field(..., description="Generation record id, empty if it was not saved")
    generation_count: int = Field(..., ge=0, description="Number of flashcards generated")
    flashcard_proposals: list[FlashcardProposalSchema]
    created_at: datetime
