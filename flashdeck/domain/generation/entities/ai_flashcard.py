"""
AIFlashcard value object.
"""

from dataclasses import dataclass

from flashdeck.constants import FLASHCARD_BACK_MAX_LENGTH, FLASHCARD_FRONT_MAX_LENGTH
from flashdeck.domain.common.exceptions import InvariantViolationError
from flashdeck.domain.generation.enums import FlashcardKind


@dataclass(frozen=True)
class AIFlashcard:
    """
    A flashcard as returned by the language model, after schema validation.

    Business Rules:
    - kind is one of the supported flashcard formats
    - front holds at most 200 characters, back at most 500
    """

    kind: FlashcardKind
    front: str
    back: str

    def __post_init__(self) -> None:
        if len(self.front) > FLASHCARD_FRONT_MAX_LENGTH:
            raise InvariantViolationError(
                "AIFlashcard", f"front exceeds {FLASHCARD_FRONT_MAX_LENGTH} characters"
            )
        if len(self.back) > FLASHCARD_BACK_MAX_LENGTH:
            raise InvariantViolationError(
                "AIFlashcard", f"back exceeds {FLASHCARD_BACK_MAX_LENGTH} characters"
            )
