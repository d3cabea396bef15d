"""
GenerationRecord entity for generation analytics and quota accounting.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import InvariantViolationError
from flashdeck.domain.common.value_objects import ContentHash, GenerationId, UserId


@dataclass(eq=False)
class GenerationRecord(Entity[GenerationId]):
    """
    Metadata about one completed call to the language model.

    One record is written per successful generation, including runs that
    produced no flashcards. Records count against the daily quota.

    Business Rules:
    - source_text_length, generated_count and duration_ms are non-negative
    - model is not empty
    """

    id: GenerationId
    user_id: UserId
    model: str
    source_text_length: int
    source_text_hash: ContentHash
    generated_count: int
    duration_ms: int
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.model or not self.model.strip():
            raise InvariantViolationError("GenerationRecord", "model cannot be empty")
        if self.source_text_length < 0:
            raise InvariantViolationError(
                "GenerationRecord", "source_text_length cannot be negative"
            )
        if self.generated_count < 0:
            raise InvariantViolationError("GenerationRecord", "generated_count cannot be negative")
        if self.duration_ms < 0:
            raise InvariantViolationError("GenerationRecord", "duration_ms cannot be negative")

    @classmethod
    def create(
        cls,
        user_id: UserId,
        model: str,
        source_text: str,
        generated_count: int,
        duration_ms: int,
    ) -> "GenerationRecord":
        """Create a new record for the given source text with a fresh id."""
        return cls(
            id=GenerationId.generate(),
            user_id=user_id,
            model=model.strip(),
            source_text_length=len(source_text),
            source_text_hash=ContentHash.compute(source_text),
            generated_count=generated_count,
            duration_ms=duration_ms,
        )

    @classmethod
    def create_with_id(
        cls,
        id: GenerationId,
        user_id: UserId,
        model: str,
        source_text_length: int,
        source_text_hash: ContentHash,
        generated_count: int,
        duration_ms: int,
        created_at: datetime,
    ) -> "GenerationRecord":
        """Reconstitute a record from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            model=model,
            source_text_length=source_text_length,
            source_text_hash=source_text_hash,
            generated_count=generated_count,
            duration_ms=duration_ms,
            created_at=created_at,
        )
