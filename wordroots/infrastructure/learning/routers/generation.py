"""API routes for adding morphemes and generating their content."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from wordroots.application.learning.use_cases.generate_morpheme_content_use_case import (
    GenerateMorphemeContentUseCase,
)
from wordroots.core import container
from wordroots.domain.common.exceptions import DomainError
from wordroots.exceptions import WordRootsError
from wordroots.infrastructure.common.di import inject_use_case
from wordroots.infrastructure.learning.mappers.content_mapper import MorphemeContentMapper
from wordroots.infrastructure.learning.schemas import GenerateRequest, GenerateResponse

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["generation"])


@router.post(
    "/generate",
    response_model=GenerateResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def generate_morpheme(
    request: GenerateRequest,
    use_case: GenerateMorphemeContentUseCase = Depends(
        inject_use_case(container.generate_morpheme_content_use_case)
    ),
) -> GenerateResponse:
    """
    Add a morpheme and generate its lesson content.

    Without a configured webhook the morpheme is registered as pending and
    no content is returned.

    Args:
        request: Morpheme token and type
        use_case: GenerateMorphemeContentUseCase injected via dependency container

    Returns:
        Success flag with the generated content or a notice message

    Raises:
        HTTPException: If the webhook fails or the content cannot be stored
    """
    try:
        result = await use_case.generate(request.morpheme, request.type)
        if result.content is None:
            return GenerateResponse(success=True, message=result.message)
        return GenerateResponse(
            success=True,
            content=MorphemeContentMapper().to_schema(result.content),
        )
    except (WordRootsError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_generate_morpheme",
            morpheme=request.morpheme,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
