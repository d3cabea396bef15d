"""AI-powered flashcard generation for decks."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.generation.use_cases.generate_flashcards_use_case import (
    GenerateFlashcardsUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.dependencies import get_current_user_id, require_ai_enabled
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.generation.schemas import (
    FlashcardProposalSchema,
    GenerateFlashcardsRequest,
    GenerateFlashcardsResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/decks", tags=["generations"])


@router.post(
    "/{deck_id}/generations",
    response_model=GenerateFlashcardsResponse,
    status_code=status.HTTP_201_CREATED,
)
@require_ai_enabled
async def generate_flashcards(
    deck_id: UUID,
    request: GenerateFlashcardsRequest,
    user_id: Annotated[UserId, Depends(get_current_user_id)],
    use_case: GenerateFlashcardsUseCase = Depends(
        inject_use_case(container.generate_flashcards_use_case)
    ),
) -> GenerateFlashcardsResponse:
    """
    Generate flashcard proposals for a deck from a source text.

    Proposals are not saved. The client reviews them and creates the
    accepted ones as regular flashcards.
    """
    try:
        result = await use_case.generate(
            user_id=user_id,
            deck_id=DeckId(deck_id),
            source_text=request.text,
            requested_count=request.count,
        )

        return GenerateFlashcardsResponse(
            generation_id=result.generation_id_str,
            generation_count=result.generated_count,
            flashcard_proposals=[
                FlashcardProposalSchema(
                    type=proposal.kind,
                    front=proposal.front,
                    back=proposal.back,
                    source=proposal.source,
                    generation_id=str(proposal.generation_id) if proposal.generation_id else None,
                    deck_id=str(proposal.deck_id),
                    is_accepted=proposal.accepted,
                )
                for proposal in result.proposals
            ],
            created_at=result.created_at,
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_generate_flashcards",
            deck_id=str(deck_id),
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
