"""DTOs for the flashcard generation use case."""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.value_objects import GenerationId
from flashdeck.domain.generation.entities import FlashcardProposal


@dataclass
class GenerationResult:
    """Outcome of one generation request."""

    generation_id: GenerationId | None
    generated_count: int
    proposals: list[FlashcardProposal]
    created_at: datetime

    @property
    def generation_id_str(self) -> str:
        """Generation id as exposed to clients, empty when no record was saved."""
        return str(self.generation_id) if self.generation_id else ""
