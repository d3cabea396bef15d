"""Best-effort persistence of generation metadata."""

import structlog

from flashdeck.application.common.result import Failure, Result, Success
from flashdeck.application.generation.failures import GenerationErrorKind, GenerationFailure
from flashdeck.application.generation.protocols.generation_repository import (
    GenerationRepositoryProtocol,
)
from flashdeck.domain.common.value_objects import UserId
from flashdeck.domain.generation.entities import GenerationRecord

logger = structlog.get_logger(__name__)


class GenerationRecorder:
    """Writes one GenerationRecord per completed call to the language model."""

    def __init__(self, generation_repository: GenerationRepositoryProtocol) -> None:
        self.generation_repository = generation_repository

    def record(
        self,
        user_id: UserId,
        model: str,
        source_text: str,
        generated_count: int,
        duration_ms: int,
    ) -> Result[GenerationRecord, GenerationFailure]:
        """
        Persist a generation record.

        Invalid record fields and storage errors come back as a Failure.
        The caller decides whether the missing record matters; the
        generation pipeline carries on without it.
        """
        try:
            record = GenerationRecord.create(
                user_id=user_id,
                model=model,
                source_text=source_text,
                generated_count=generated_count,
                duration_ms=duration_ms,
            )
            saved = self.generation_repository.insert_generation_record(record)
        except Exception as e:
            return Failure(
                GenerationFailure(
                    GenerationErrorKind.RECORDING_FAILED,
                    "Failed to save generation record",
                    diagnostic=str(e),
                )
            )

        logger.debug(
            "generation_record_saved",
            generation_id=str(saved.id),
            user_id=str(user_id),
        )
        return Success(saved)
