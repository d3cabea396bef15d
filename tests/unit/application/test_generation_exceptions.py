import pytest

from flashdeck.application.generation.exceptions import (
    GENERIC_GENERATION_FAILURE,
    AuthenticationFailedError,
    DailyLimitExceededError,
    GenerationError,
    InvalidJSONError,
    RateLimitedError,
    ServiceUnavailableError,
    TextTooShortError,
    TransportError,
    error_for_failure,
)
from flashdeck.application.generation.failures import GenerationErrorKind, GenerationFailure


class TestErrorForFailure:
    def test_input_failure_keeps_message(self) -> None:
        error = error_for_failure(
            GenerationFailure(GenerationErrorKind.TEXT_TOO_SHORT, "too short, 12 chars, minimum 1000")
        )
        assert isinstance(error, TextTooShortError)
        assert error.status_code == 400
        assert error.message == "too short, 12 chars, minimum 1000"

    def test_response_failure_hides_diagnostic(self) -> None:
        error = error_for_failure(
            GenerationFailure(
                GenerationErrorKind.INVALID_JSON,
                GENERIC_GENERATION_FAILURE,
                diagnostic="Expecting value: line 1 column 1",
            )
        )
        assert isinstance(error, InvalidJSONError)
        assert error.status_code == 500
        assert error.message == GENERIC_GENERATION_FAILURE
        assert error.diagnostic == "Expecting value: line 1 column 1"

    @pytest.mark.parametrize(
        ("kind", "error_type", "status_code"),
        [
            (GenerationErrorKind.AUTHENTICATION_FAILED, AuthenticationFailedError, 500),
            (GenerationErrorKind.RATE_LIMITED, RateLimitedError, 503),
            (GenerationErrorKind.SERVICE_UNAVAILABLE, ServiceUnavailableError, 503),
            (GenerationErrorKind.TRANSPORT_ERROR, TransportError, 500),
        ],
    )
    def test_llm_failures_map_to_status(
        self, kind: GenerationErrorKind, error_type: type[GenerationError], status_code: int
    ) -> None:
        error = error_for_failure(GenerationFailure(kind, "provider said no"))
        assert isinstance(error, error_type)
        assert error.status_code == status_code

    def test_recording_failure_has_no_exception(self) -> None:
        with pytest.raises(ValueError, match="recording_failed"):
            error_for_failure(GenerationFailure(GenerationErrorKind.RECORDING_FAILED, "lost"))


class TestGenerationErrorMessages:
    def test_llm_failure_messages_are_distinct(self) -> None:
        messages = {
            cls().message
            for cls in (
                AuthenticationFailedError,
                RateLimitedError,
                ServiceUnavailableError,
                TransportError,
            )
        }
        assert len(messages) == 4

    def test_unavailable_errors_carry_fallback(self) -> None:
        assert RateLimitedError.fallback is not None
        assert ServiceUnavailableError.fallback is not None
        assert "manually" in ServiceUnavailableError.fallback
        assert AuthenticationFailedError.fallback is None

    def test_daily_limit_message_mentions_tomorrow(self) -> None:
        error = DailyLimitExceededError(10)
        assert error.status_code == 429
        assert "10" in error.message
        assert "tomorrow" in error.message
