"""Exceptions for the flashcard generation pipeline."""

from typing import ClassVar

from flashdeck.application.generation.failures import GenerationErrorKind, GenerationFailure
from flashdeck.exceptions import FlashdeckError, ValidationError

MANUAL_CREATION_FALLBACK = (
    "You can create flashcards manually using POST {api_prefix}/decks/{deck_id}/flashcards"
)
GENERIC_GENERATION_FAILURE = "Flashcard generation failed. Please try again."


class GenerationError(FlashdeckError):
    """Base class for generation failures surfaced to the caller."""

    kind: ClassVar[GenerationErrorKind]
    default_message: ClassVar[str] = GENERIC_GENERATION_FAILURE
    status: ClassVar[int] = 500
    fallback: ClassVar[str | None] = None

    def __init__(self, message: str | None = None, *, diagnostic: str | None = None) -> None:
        self.diagnostic = diagnostic
        super().__init__(message or self.default_message, status_code=self.status)


class DailyLimitExceededError(GenerationError):
    """User has used up today's generations."""

    kind = GenerationErrorKind.DAILY_LIMIT_EXCEEDED
    status = 429

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(
            f"You have reached your daily limit of {limit} flashcard generations. "
            "Please try again tomorrow."
        )


class QuotaCheckFailedError(GenerationError):
    """The daily usage count could not be read."""

    kind = GenerationErrorKind.QUOTA_CHECK_FAILED
    default_message = "Could not verify your daily generation limit. Please try again later."


class InputValidationError(ValidationError):
    """Base class for request input contract violations."""

    kind: ClassVar[GenerationErrorKind]

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400)


class InvalidInputTypeError(InputValidationError):
    kind = GenerationErrorKind.INVALID_INPUT_TYPE


class TextTooShortError(InputValidationError):
    kind = GenerationErrorKind.TEXT_TOO_SHORT


class TextTooLongError(InputValidationError):
    kind = GenerationErrorKind.TEXT_TOO_LONG


class InvalidCountError(InputValidationError):
    kind = GenerationErrorKind.INVALID_COUNT


class AuthenticationFailedError(GenerationError):
    kind = GenerationErrorKind.AUTHENTICATION_FAILED
    default_message = "AI provider authentication failed. Check the configured API key."


class RateLimitedError(GenerationError):
    kind = GenerationErrorKind.RATE_LIMITED
    default_message = (
        "AI service rate limit exceeded. Please try again later "
        "or create flashcards manually instead."
    )
    status = 503
    fallback = MANUAL_CREATION_FALLBACK


class ServiceUnavailableError(GenerationError):
    kind = GenerationErrorKind.SERVICE_UNAVAILABLE
    default_message = (
        "AI service is temporarily unavailable. Please try again later "
        "or create flashcards manually instead."
    )
    status = 503
    fallback = MANUAL_CREATION_FALLBACK


class TransportError(GenerationError):
    kind = GenerationErrorKind.TRANSPORT_ERROR
    default_message = "Could not reach the AI service because of a network error."


class ProviderError(GenerationError):
    kind = GenerationErrorKind.PROVIDER_ERROR
    default_message = "The AI service rejected the generation request."


class UnknownGenerationError(GenerationError):
    kind = GenerationErrorKind.UNKNOWN_ERROR
    default_message = "An unexpected error occurred while generating flashcards."


class EmptyResponseError(GenerationError):
    kind = GenerationErrorKind.EMPTY_RESPONSE


class NoMessageContentError(GenerationError):
    kind = GenerationErrorKind.NO_MESSAGE_CONTENT


class InvalidJSONError(GenerationError):
    kind = GenerationErrorKind.INVALID_JSON


class SchemaValidationFailedError(GenerationError):
    kind = GenerationErrorKind.SCHEMA_VALIDATION_FAILED


_INPUT_ERRORS: dict[GenerationErrorKind, type[InputValidationError]] = {
    cls.kind: cls
    for cls in (InvalidInputTypeError, TextTooShortError, TextTooLongError, InvalidCountError)
}

_GENERATION_ERRORS: dict[GenerationErrorKind, type[GenerationError]] = {
    cls.kind: cls
    for cls in (
        QuotaCheckFailedError,
        AuthenticationFailedError,
        RateLimitedError,
        ServiceUnavailableError,
        TransportError,
        ProviderError,
        UnknownGenerationError,
        EmptyResponseError,
        NoMessageContentError,
        InvalidJSONError,
        SchemaValidationFailedError,
    )
}


def error_for_failure(failure: GenerationFailure) -> FlashdeckError:
    """
    Build the exception that surfaces a pipeline failure to the caller.

    Input failures keep their message, which embeds the measured value.
    Every other failure keeps its own user-facing message and moves the
    underlying detail to `diagnostic`.
    """
    if failure.kind in _INPUT_ERRORS:
        return _INPUT_ERRORS[failure.kind](failure.message)
    if failure.kind in _GENERATION_ERRORS:
        return _GENERATION_ERRORS[failure.kind](diagnostic=failure.diagnostic)
    raise ValueError(f"No exception is mapped for failure kind {failure.kind}")
