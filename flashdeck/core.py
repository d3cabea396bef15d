from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.generation.services.generation_recorder import GenerationRecorder
from flashdeck.application.generation.services.quota_guard import QuotaGuard
from flashdeck.application.generation.use_cases.generate_flashcards_use_case import (
    GenerateFlashcardsUseCase,
)
from flashdeck.config import get_settings
from flashdeck.infrastructure.ai.ai_client import get_ai_client
from flashdeck.infrastructure.ai.ai_service import AIFlashcardService
from flashdeck.infrastructure.ai.structured_generation_client import StructuredGenerationClient
from flashdeck.infrastructure.generation.repositories.generation_repository import (
    GenerationRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    # Repositories
    generation_repository = providers.Factory(GenerationRepository, db=db)

    # AI services (the client is only built on first use)
    structured_generation_client = providers.Singleton(
        StructuredGenerationClient,
        client=providers.Callable(get_ai_client),
        model=settings.provided.AI_MODEL_NAME,
        temperature=settings.provided.AI_TEMPERATURE,
        max_tokens=settings.provided.AI_MAX_TOKENS,
        max_retries=settings.provided.GENERATION_MAX_RETRIES,
        base_delay_ms=settings.provided.GENERATION_RETRY_BASE_DELAY_MS,
        max_delay_ms=settings.provided.GENERATION_RETRY_MAX_DELAY_MS,
    )
    ai_flashcard_service = providers.Singleton(
        AIFlashcardService,
        generation_client=structured_generation_client,
    )

    # Generation module, application services and use cases
    quota_guard = providers.Factory(
        QuotaGuard,
        generation_repository=generation_repository,
        daily_limit=settings.provided.DAILY_GENERATION_LIMIT,
    )
    generation_recorder = providers.Factory(
        GenerationRecorder,
        generation_repository=generation_repository,
    )
    generate_flashcards_use_case = providers.Factory(
        GenerateFlashcardsUseCase,
        quota_guard=quota_guard,
        ai_flashcard_service=ai_flashcard_service,
        generation_recorder=generation_recorder,
    )


container = Container()
