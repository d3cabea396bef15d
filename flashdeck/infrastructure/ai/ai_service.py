import structlog

from flashdeck.application.common.result import Failure, Success
from flashdeck.application.generation.exceptions import error_for_failure
from flashdeck.domain.generation.entities import AIFlashcard
from flashdeck.infrastructure.ai.prompts import build_messages
from flashdeck.infrastructure.ai.response_validator import validate_completion
from flashdeck.infrastructure.ai.structured_generation_client import StructuredGenerationClient

logger = structlog.get_logger(__name__)


class AIFlashcardService:
    def __init__(self, generation_client: StructuredGenerationClient) -> None:
        self.generation_client = generation_client

    @property
    def model_name(self) -> str:
        return self.generation_client.model

    async def generate_flashcards(self, source_text: str, count: int) -> list[AIFlashcard]:
        system_message, user_message = build_messages(source_text, count)
        completion = await self.generation_client.complete(system_message, user_message)

        match validate_completion(completion):
            case Success(value=flashcards):
                return flashcards
            case Failure(error=failure):
                logger.error(
                    "llm_response_rejected",
                    kind=failure.kind,
                    diagnostic=failure.diagnostic,
                )
                raise error_for_failure(failure)
