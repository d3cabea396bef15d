"""Expected failure values produced by generation pipeline steps."""

from dataclasses import dataclass
from enum import StrEnum


class GenerationErrorKind(StrEnum):
    """Every way a generation request can fail."""

    # Quota
    DAILY_LIMIT_EXCEEDED = "daily_limit_exceeded"
    QUOTA_CHECK_FAILED = "quota_check_failed"

    # Input contract
    INVALID_INPUT_TYPE = "invalid_input_type"
    TEXT_TOO_SHORT = "text_too_short"
    TEXT_TOO_LONG = "text_too_long"
    INVALID_COUNT = "invalid_count"

    # Language model call
    AUTHENTICATION_FAILED = "authentication_failed"
    RATE_LIMITED = "rate_limited"
    SERVICE_UNAVAILABLE = "service_unavailable"
    TRANSPORT_ERROR = "transport_error"
    PROVIDER_ERROR = "provider_error"
    UNKNOWN_ERROR = "unknown_error"

    # Response shape
    EMPTY_RESPONSE = "empty_response"
    NO_MESSAGE_CONTENT = "no_message_content"
    INVALID_JSON = "invalid_json"
    SCHEMA_VALIDATION_FAILED = "schema_validation_failed"

    # Bookkeeping (never fatal)
    RECORDING_FAILED = "recording_failed"


@dataclass(frozen=True)
class GenerationFailure:
    """
    A failed pipeline step.

    `message` is safe to show to end users. `diagnostic` keeps the
    underlying detail (validator output, storage error) for logs only.
    """

    kind: GenerationErrorKind
    message: str
    diagnostic: str | None = None
