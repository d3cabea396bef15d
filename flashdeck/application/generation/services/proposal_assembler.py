from flashdeck.domain.common.value_objects import DeckId, GenerationId
from flashdeck.domain.generation.entities import AIFlashcard, FlashcardProposal
from flashdeck.domain.generation.enums import FlashcardSource


def assemble_proposals(
    flashcards: list[AIFlashcard],
    generation_id: GenerationId | None,
    deck_id: DeckId,
) -> list[FlashcardProposal]:
    """Turn validated flashcards into unaccepted proposals, keeping the model's order."""
    return [
        FlashcardProposal(
            kind=flashcard.kind,
            front=flashcard.front,
            back=flashcard.back,
            deck_id=deck_id,
            generation_id=generation_id,
            source=FlashcardSource.AI_FULL,
            accepted=False,
        )
        for flashcard in flashcards
    ]
