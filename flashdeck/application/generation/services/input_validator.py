"""
Validation of caller-supplied generation input.

Runs before any external call. Expected violations are returned as
Failure values; nothing here raises for bad input.
"""

from dataclasses import dataclass

from flashdeck.application.common.result import Failure, Result, Success
from flashdeck.application.generation.failures import GenerationErrorKind, GenerationFailure
from flashdeck.constants import (
    MAX_FLASHCARD_COUNT,
    MIN_FLASHCARD_COUNT,
    SOURCE_TEXT_MAX_LENGTH,
    SOURCE_TEXT_MIN_LENGTH,
)

# Flashcard density targeted when the caller leaves the count open
DEFAULT_COUNT_AT_MIN_LENGTH = 10
DEFAULT_COUNT_AT_MAX_LENGTH = 50


@dataclass(frozen=True)
class GenerationInput:
    """Source text and flashcard count that passed validation."""

    source_text: str
    count: int


def default_flashcard_count(text_length: int) -> int:
    """
    Suggest a flashcard count for a source text of the given length.

    Scales linearly from 10 cards at the minimum length to 50 at the maximum.
    """
    clamped = min(max(text_length, SOURCE_TEXT_MIN_LENGTH), SOURCE_TEXT_MAX_LENGTH)
    span = SOURCE_TEXT_MAX_LENGTH - SOURCE_TEXT_MIN_LENGTH
    extra = DEFAULT_COUNT_AT_MAX_LENGTH - DEFAULT_COUNT_AT_MIN_LENGTH
    return DEFAULT_COUNT_AT_MIN_LENGTH + round(
        (clamped - SOURCE_TEXT_MIN_LENGTH) * extra / span
    )


def validate_source_text(source_text: object) -> Result[str, GenerationFailure]:
    if not isinstance(source_text, str):
        return Failure(
            GenerationFailure(
                GenerationErrorKind.INVALID_INPUT_TYPE,
                f"Source text must be a string, got {type(source_text).__name__}",
            )
        )

    length = len(source_text)
    if length < SOURCE_TEXT_MIN_LENGTH:
        return Failure(
            GenerationFailure(
                GenerationErrorKind.TEXT_TOO_SHORT,
                f"Source text is too short, {length} chars, minimum {SOURCE_TEXT_MIN_LENGTH}",
            )
        )
    if length > SOURCE_TEXT_MAX_LENGTH:
        return Failure(
            GenerationFailure(
                GenerationErrorKind.TEXT_TOO_LONG,
                f"Source text is too long, {length} chars, maximum {SOURCE_TEXT_MAX_LENGTH}",
            )
        )
    return Success(source_text)


def validate_flashcard_count(requested_count: object) -> Result[int, GenerationFailure]:
    # bool is an int subclass but never a meaningful count
    if (
        not isinstance(requested_count, int)
        or isinstance(requested_count, bool)
        or not MIN_FLASHCARD_COUNT <= requested_count <= MAX_FLASHCARD_COUNT
    ):
        return Failure(
            GenerationFailure(
                GenerationErrorKind.INVALID_COUNT,
                f"Flashcard count must be an integer between {MIN_FLASHCARD_COUNT} "
                f"and {MAX_FLASHCARD_COUNT}, got {requested_count!r}",
            )
        )
    return Success(requested_count)


def validate_generation_input(
    source_text: object, requested_count: object | None = None
) -> Result[GenerationInput, GenerationFailure]:
    """
    Validate the source text and the requested flashcard count.

    The text is checked first: its type, then its length bounds. When no
    count is requested, a default is derived from the text length.

    Args:
        source_text: Text to generate flashcards from
        requested_count: Number of flashcards wanted, or None for the default

    Returns:
        Success with the validated input, or Failure naming the first violation
    """
    match validate_source_text(source_text):
        case Failure() as failure:
            return failure
        case Success(value=text):
            pass

    if requested_count is None:
        return Success(GenerationInput(source_text=text, count=default_flashcard_count(len(text))))

    match validate_flashcard_count(requested_count):
        case Failure() as failure:
            return failure
        case Success(value=count):
            return Success(GenerationInput(source_text=text, count=count))
