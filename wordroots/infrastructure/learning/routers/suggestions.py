"""API routes for morpheme suggestions."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from wordroots.application.learning.use_cases.suggest_morphemes_use_case import (
    SuggestMorphemesUseCase,
)
from wordroots.core import container
from wordroots.domain.common.exceptions import DomainError
from wordroots.exceptions import WordRootsError
from wordroots.infrastructure.common.di import inject_use_case
from wordroots.infrastructure.learning.schemas import (
    SuggestionItem,
    SuggestionsResponse,
    SuggestRequest,
)

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["suggestions"])


@router.post(
    "/suggest",
    response_model=SuggestionsResponse,
    status_code=status.HTTP_200_OK,
)
async def suggest_morphemes(
    request: SuggestRequest,
    use_case: SuggestMorphemesUseCase = Depends(
        inject_use_case(container.suggest_morphemes_use_case)
    ),
) -> SuggestionsResponse:
    """
    Suggest morphemes of a type that are not registered yet.

    Falls back to a static list when the suggestion webhook is missing or fails.
    """
    try:
        suggestions = await use_case.suggest(request.type, request.input)
        return SuggestionsResponse(
            suggestions=[SuggestionItem(id=s.id, meaning=s.meaning) for s in suggestions]
        )
    except (WordRootsError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_suggest_morphemes",
            morpheme_type=request.type,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
