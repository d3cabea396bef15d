from typing import Protocol

from flashdeck.domain.generation.entities import AIFlashcard


class AIFlashcardServiceProtocol(Protocol):
    @property
    def model_name(self) -> str: ...

    async def generate_flashcards(self, source_text: str, count: int) -> list[AIFlashcard]: ...
