"""Retry classification and backoff for language model calls."""

from dataclasses import dataclass
from enum import Enum, auto

import openai

from flashdeck.application.generation.failures import GenerationErrorKind

DEFAULT_BASE_DELAY_MS = 1000
DEFAULT_MAX_DELAY_MS = 10000

TRANSPORT_ERROR_MARKERS = ("network", "timeout", "econnreset")

RETRYABLE_KINDS = frozenset(
    {
        GenerationErrorKind.RATE_LIMITED,
        GenerationErrorKind.SERVICE_UNAVAILABLE,
        GenerationErrorKind.TRANSPORT_ERROR,
    }
)


class AttemptState(Enum):
    """States of one call to the language model, retries included."""

    ATTEMPTING = auto()
    SUCCEEDED = auto()
    FAILED_RETRYABLE = auto()
    FAILED_FATAL = auto()


@dataclass(frozen=True)
class ClassifiedError:
    kind: GenerationErrorKind

    @property
    def retryable(self) -> bool:
        return self.kind in RETRYABLE_KINDS


def backoff_delay_ms(
    attempt: int,
    base_delay_ms: int = DEFAULT_BASE_DELAY_MS,
    max_delay_ms: int = DEFAULT_MAX_DELAY_MS,
) -> int:
    """Delay before the retry that follows the zero-based `attempt`."""
    return min(base_delay_ms * 2**attempt, max_delay_ms)


def _looks_like_transport_error(error: BaseException) -> bool:
    message = str(error).lower()
    return any(marker in message for marker in TRANSPORT_ERROR_MARKERS)


def classify_llm_error(error: Exception) -> ClassifiedError:
    """
    Map an exception raised by the chat client onto the generation taxonomy.

    Status codes decide for provider responses: 401 is an authentication
    failure, 429 a rate limit, 5xx an outage and any other status a provider
    error. Connection problems, and errors whose message mentions network,
    timeout or econnreset, are transport errors.
    """
    if isinstance(error, openai.APIStatusError):
        status = error.status_code
        if status == 401:
            return ClassifiedError(GenerationErrorKind.AUTHENTICATION_FAILED)
        if status == 429:
            return ClassifiedError(GenerationErrorKind.RATE_LIMITED)
        if status >= 500:
            return ClassifiedError(GenerationErrorKind.SERVICE_UNAVAILABLE)
        return ClassifiedError(GenerationErrorKind.PROVIDER_ERROR)

    # APITimeoutError is a subclass
    if isinstance(error, openai.APIConnectionError) or _looks_like_transport_error(error):
        return ClassifiedError(GenerationErrorKind.TRANSPORT_ERROR)

    if isinstance(error, openai.APIError):
        return ClassifiedError(GenerationErrorKind.PROVIDER_ERROR)

    return ClassifiedError(GenerationErrorKind.UNKNOWN_ERROR)
