from enum import StrEnum


class FlashcardKind(StrEnum):
    """Flashcard formats the generator is allowed to produce."""

    QUESTION_ANSWER = "question-answer"
    GAPS = "gaps"


class FlashcardSource(StrEnum):
    """Where a flashcard came from."""

    MANUAL = "manual"
    AI_FULL = "ai-full"
    AI_EDITED = "ai-edited"
