"""API routes for practice decks."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from wordroots.application.learning.use_cases.build_practice_deck_use_case import (
    BuildPracticeDeckUseCase,
)
from wordroots.core import container
from wordroots.domain.common.exceptions import DomainError
from wordroots.exceptions import WordRootsError
from wordroots.infrastructure.common.di import inject_use_case
from wordroots.infrastructure.learning.mappers.question_mapper import QuizQuestionMapper
from wordroots.infrastructure.learning.schemas import PracticeQuestionsResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/practice", tags=["practice"])


@router.get(
    "/questions",
    response_model=PracticeQuestionsResponse,
    status_code=status.HTTP_200_OK,
)
async def get_practice_questions(
    use_case: BuildPracticeDeckUseCase = Depends(
        inject_use_case(container.build_practice_deck_use_case)
    ),
) -> PracticeQuestionsResponse:
    """
    Start a practice session over every stored lesson and return its deck.

    Scoring happens client side; an empty question list means there is not
    enough content to practise yet.
    """
    try:
        session = await use_case.start_session()
        mapper = QuizQuestionMapper()
        return PracticeQuestionsResponse(
            questions=[mapper.to_schema(q) for q in session.questions],
            total=session.deck_size,
        )
    except (WordRootsError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_build_practice_deck", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
