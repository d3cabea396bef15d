from functools import lru_cache

from openai import AsyncOpenAI

from flashdeck.config import get_settings


def _get_client() -> AsyncOpenAI:
    """
    Get an OpenAI-compatible chat client depending on environment settings.

    SDK-level retries are switched off; StructuredGenerationClient owns the
    retry policy.
    """
    settings = get_settings()

    if settings.AI_PROVIDER == "ollama":
        # Guaranteed by the settings validator
        assert settings.OPENAI_BASE_URL is not None
        return AsyncOpenAI(
            # Ollama ignores the key but the SDK requires one
            api_key="ollama",
            base_url=settings.OPENAI_BASE_URL,
            timeout=settings.AI_REQUEST_TIMEOUT,
            max_retries=0,
        )

    if settings.AI_PROVIDER == "openai":
        # Guaranteed by the settings validator
        assert settings.OPENAI_API_KEY is not None
        return AsyncOpenAI(
            api_key=settings.OPENAI_API_KEY,
            timeout=settings.AI_REQUEST_TIMEOUT,
            max_retries=0,
        )

    raise Exception("No such AI model provider available")


@lru_cache
def get_ai_client() -> AsyncOpenAI:
    """
    Get cached AI client. The client is only built once AI features are used,
    so importing AI modules never requires provider credentials.
    """
    return _get_client()
