"""Chat completion calls with a JSON-schema response format and retries."""

import asyncio
from collections.abc import Awaitable, Callable

import structlog
from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion

from flashdeck.application.generation.exceptions import GenerationError, error_for_failure
from flashdeck.application.generation.failures import GenerationFailure
from flashdeck.infrastructure.ai.response_schema import RESPONSE_FORMAT
from flashdeck.infrastructure.ai.retry_policy import (
    DEFAULT_BASE_DELAY_MS,
    DEFAULT_MAX_DELAY_MS,
    AttemptState,
    ClassifiedError,
    backoff_delay_ms,
    classify_llm_error,
)

logger = structlog.get_logger(__name__)


class StructuredGenerationClient:
    """
    Calls the language model once per attempt, with one call in flight at a time.

    Retryable failures (rate limits, 5xx, transport errors) are retried up to
    `max_retries` more times with exponential backoff. Fatal failures surface
    after the first attempt without sleeping.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str,
        temperature: float,
        max_tokens: int,
        max_retries: int = 3,
        base_delay_ms: int = DEFAULT_BASE_DELAY_MS,
        max_delay_ms: int = DEFAULT_MAX_DELAY_MS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms
        self.sleep = sleep

    async def _call(self, system_message: str, user_message: str) -> ChatCompletion:
        return await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_message},
                {"role": "user", "content": user_message},
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            response_format=RESPONSE_FORMAT,  # type: ignore[arg-type]
        )

    async def complete(self, system_message: str, user_message: str) -> ChatCompletion:
        """
        Run the call until it succeeds or fails for good.

        Raises:
            GenerationError: Subclass matching the last failure's kind, chained
                to the client exception
        """
        attempt = 0
        state = AttemptState.ATTEMPTING
        completion: ChatCompletion | None = None
        last_error: Exception | None = None
        classified: ClassifiedError | None = None

        while True:
            match state:
                case AttemptState.ATTEMPTING:
                    try:
                        completion = await self._call(system_message, user_message)
                    except Exception as e:
                        last_error = e
                        classified = classify_llm_error(e)
                        if classified.retryable and attempt < self.max_retries:
                            state = AttemptState.FAILED_RETRYABLE
                        else:
                            state = AttemptState.FAILED_FATAL
                    else:
                        state = AttemptState.SUCCEEDED

                case AttemptState.SUCCEEDED:
                    assert completion is not None
                    if attempt:
                        logger.info("llm_call_succeeded_after_retry", attempts=attempt + 1)
                    return completion

                case AttemptState.FAILED_RETRYABLE:
                    assert classified is not None
                    delay_ms = backoff_delay_ms(attempt, self.base_delay_ms, self.max_delay_ms)
                    logger.warning(
                        "llm_call_retrying",
                        attempt=attempt + 1,
                        max_attempts=self.max_retries + 1,
                        delay_ms=delay_ms,
                        kind=classified.kind,
                    )
                    await self.sleep(delay_ms / 1000)
                    attempt += 1
                    state = AttemptState.ATTEMPTING

                case AttemptState.FAILED_FATAL:
                    assert classified is not None and last_error is not None
                    raise self._surface(classified, last_error, attempt + 1) from last_error

    def _surface(
        self, classified: ClassifiedError, error: Exception, attempts: int
    ) -> GenerationError:
        logger.error(
            "llm_call_failed",
            kind=classified.kind,
            attempts=attempts,
            retryable=classified.retryable,
            error=str(error),
        )
        surfaced = error_for_failure(
            GenerationFailure(classified.kind, str(error), diagnostic=str(error))
        )
        assert isinstance(surfaced, GenerationError)
        return surfaced
