"""Generation domain entities."""

from .ai_flashcard import AIFlashcard
from .flashcard_proposal import FlashcardProposal
from .generation_record import GenerationRecord

__all__ = [
    "AIFlashcard",
    "FlashcardProposal",
    "GenerationRecord",
]
