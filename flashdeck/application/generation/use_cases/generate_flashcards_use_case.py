"""Use case for AI-assisted flashcard generation."""

import time
from datetime import UTC, datetime

import structlog

from flashdeck.application.common.result import Failure, Success
from flashdeck.application.generation.exceptions import error_for_failure
from flashdeck.application.generation.protocols.ai_flashcard_service import (
    AIFlashcardServiceProtocol,
)
from flashdeck.application.generation.services.generation_recorder import GenerationRecorder
from flashdeck.application.generation.services.input_validator import validate_generation_input
from flashdeck.application.generation.services.proposal_assembler import assemble_proposals
from flashdeck.application.generation.services.quota_guard import QuotaGuard
from flashdeck.application.generation.use_cases.dtos import GenerationResult
from flashdeck.domain.common.value_objects import DeckId, UserId

logger = structlog.get_logger(__name__)


class GenerateFlashcardsUseCase:
    """Use case for turning a source text into flashcard proposals."""

    def __init__(
        self,
        quota_guard: QuotaGuard,
        ai_flashcard_service: AIFlashcardServiceProtocol,
        generation_recorder: GenerationRecorder,
    ) -> None:
        """Initialize use case with dependencies."""
        self.quota_guard = quota_guard
        self.ai_flashcard_service = ai_flashcard_service
        self.generation_recorder = generation_recorder

    async def generate(
        self,
        user_id: UserId,
        deck_id: DeckId,
        source_text: object,
        requested_count: object | None = None,
    ) -> GenerationResult:
        """
        Generate flashcard proposals for a deck from a source text.

        Steps run in order: quota check, input validation, the language model
        call (prompting, retries and response validation live behind the AI
        service), best-effort recording, then proposal assembly.

        Args:
            user_id: The requesting user
            deck_id: Deck the proposals are meant for
            source_text: Text to generate flashcards from
            requested_count: Number of flashcards wanted, or None for a default
                derived from the text length

        Returns:
            GenerationResult with proposals in the order the model produced them

        Raises:
            DailyLimitExceededError: If the user has used up today's generations
            QuotaCheckFailedError: If today's usage cannot be read
            InputValidationError: If the text or the count is out of bounds
            GenerationError: If the language model call fails
        """
        started = time.monotonic()
        self.quota_guard.ensure_within_limit(user_id)

        match validate_generation_input(source_text, requested_count):
            case Failure(error=failure):
                logger.info(
                    "generation_input_rejected",
                    user_id=str(user_id),
                    kind=failure.kind,
                )
                raise error_for_failure(failure)
            case Success(value=generation_input):
                pass

        logger.info(
            "generating_flashcards",
            user_id=str(user_id),
            deck_id=str(deck_id),
            source_text_length=len(generation_input.source_text),
            requested_count=generation_input.count,
        )

        flashcards = await self.ai_flashcard_service.generate_flashcards(
            generation_input.source_text, generation_input.count
        )
        duration_ms = int((time.monotonic() - started) * 1000)

        recorded = self.generation_recorder.record(
            user_id=user_id,
            model=self.ai_flashcard_service.model_name,
            source_text=generation_input.source_text,
            generated_count=len(flashcards),
            duration_ms=duration_ms,
        )
        match recorded:
            case Success(value=record):
                generation_id = record.id
                created_at = record.created_at
            case Failure(error=failure):
                # Proposals are still returned without a generation record
                logger.error(
                    "generation_record_failed",
                    user_id=str(user_id),
                    kind=failure.kind,
                    error=failure.diagnostic,
                )
                generation_id = None
                created_at = datetime.now(UTC)

        proposals = assemble_proposals(flashcards, generation_id, deck_id)

        logger.info(
            "flashcards_generated",
            user_id=str(user_id),
            deck_id=str(deck_id),
            generated_count=len(proposals),
            duration_ms=duration_ms,
            generation_id=str(generation_id) if generation_id else None,
        )

        return GenerationResult(
            generation_id=generation_id,
            generated_count=len(flashcards),
            proposals=proposals,
            created_at=created_at,
        )
