"""Structured output contract for flashcard generation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from flashdeck.constants import (
    FLASHCARD_BACK_MAX_LENGTH,
    FLASHCARD_FRONT_MAX_LENGTH,
    MAX_FLASHCARD_COUNT,
    MIN_FLASHCARD_COUNT,
)
from flashdeck.domain.generation.enums import FlashcardKind


class AIFlashcardPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: FlashcardKind
    front: str = Field(max_length=FLASHCARD_FRONT_MAX_LENGTH)
    back: str = Field(max_length=FLASHCARD_BACK_MAX_LENGTH)


class AIGenerationPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    flashcards: list[AIFlashcardPayload] = Field(
        min_length=MIN_FLASHCARD_COUNT, max_length=MAX_FLASHCARD_COUNT
    )


# Sent as `response_format`; the provider enforces it in strict mode
RESPONSE_FORMAT: dict[str, Any] = {
    "type": "json_schema",
    "json_schema": {
        "name": "AIGenerationResponse",
        "strict": True,
        "schema": {
            "type": "object",
            "properties": {
                "flashcards": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "type": {
                                "type": "string",
                                "enum": [kind.value for kind in FlashcardKind],
                            },
                            "front": {
                                "type": "string",
                                "maxLength": FLASHCARD_FRONT_MAX_LENGTH,
                            },
                            "back": {
                                "type": "string",
                                "maxLength": FLASHCARD_BACK_MAX_LENGTH,
                            },
                        },
                        "required": ["type", "front", "back"],
                        "additionalProperties": False,
                    },
                    "minItems": MIN_FLASHCARD_COUNT,
                    "maxItems": MAX_FLASHCARD_COUNT,
                },
            },
            "required": ["flashcards"],
            "additionalProperties": False,
        },
    },
}
