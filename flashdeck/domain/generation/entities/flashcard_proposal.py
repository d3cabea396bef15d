from dataclasses import dataclass

from flashdeck.domain.common.value_objects import DeckId, GenerationId
from flashdeck.domain.generation.enums import FlashcardKind, FlashcardSource


@dataclass(frozen=True)
class FlashcardProposal:
    """
    An AI-generated flashcard candidate awaiting human review.

    Proposals are never persisted by the generation pipeline. The caller
    decides which ones become real flashcards.
    """

    kind: FlashcardKind
    front: str
    back: str
    deck_id: DeckId
    generation_id: GenerationId | None
    source: FlashcardSource = FlashcardSource.AI_FULL
    accepted: bool = False
