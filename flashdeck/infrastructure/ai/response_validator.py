"""Validation of raw chat completions against the flashcard schema."""

import json

from openai.types.chat import ChatCompletion
from pydantic import ValidationError

from flashdeck.application.common.result import Failure, Result, Success
from flashdeck.application.generation.exceptions import GENERIC_GENERATION_FAILURE
from flashdeck.application.generation.failures import GenerationErrorKind, GenerationFailure
from flashdeck.domain.generation.entities import AIFlashcard
from flashdeck.infrastructure.ai.response_schema import AIGenerationPayload


def _failure(kind: GenerationErrorKind, diagnostic: str) -> Failure[GenerationFailure]:
    return Failure(GenerationFailure(kind, GENERIC_GENERATION_FAILURE, diagnostic=diagnostic))


def validate_completion(completion: ChatCompletion) -> Result[list[AIFlashcard], GenerationFailure]:
    """
    Extract validated flashcards from a chat completion.

    Checks run in order: at least one choice, non-empty message content,
    parseable JSON, then the flashcard schema (type enum, side length
    ceilings, between 1 and 100 items).

    Returns:
        Success with flashcards in the order the model returned them, or
        Failure whose diagnostic describes what was wrong with the response
    """
    if not completion.choices:
        return _failure(GenerationErrorKind.EMPTY_RESPONSE, "completion has no choices")

    content = completion.choices[0].message.content
    if not content:
        return _failure(
            GenerationErrorKind.NO_MESSAGE_CONTENT, "first choice has no message content"
        )

    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        return _failure(GenerationErrorKind.INVALID_JSON, f"content is not valid JSON: {e}")

    try:
        payload = AIGenerationPayload.model_validate(parsed)
    except ValidationError as e:
        return _failure(GenerationErrorKind.SCHEMA_VALIDATION_FAILED, str(e))

    return Success(
        [AIFlashcard(kind=card.type, front=card.front, back=card.back) for card in payload.flashcards]
    )
