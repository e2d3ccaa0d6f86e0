"""API routes for morpheme lesson content."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from wordroots.application.learning.use_cases.morpheme_catalog_use_case import (
    MorphemeCatalogUseCase,
)
from wordroots.core import container
from wordroots.domain.common.exceptions import DomainError
from wordroots.exceptions import WordRootsError
from wordroots.infrastructure.common.di import inject_use_case
from wordroots.infrastructure.learning.mappers.content_mapper import MorphemeContentMapper
from wordroots.infrastructure.learning.schemas import MorphemeContent

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/content", tags=["content"])


@router.get(
    "/{morpheme_id}",
    response_model=MorphemeContent,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_morpheme_content(
    morpheme_id: str,
    use_case: MorphemeCatalogUseCase = Depends(
        inject_use_case(container.morpheme_catalog_use_case)
    ),
) -> MorphemeContent:
    """
    Get the lesson content of a morpheme.

    Args:
        morpheme_id: Registry id of the morpheme
        use_case: MorphemeCatalogUseCase injected via dependency container

    Returns:
        Full lesson content

    Raises:
        HTTPException: If the content is missing, malformed or cannot be read
    """
    try:
        content = use_case.get_content(morpheme_id)
        return MorphemeContentMapper().to_schema(content)
    except (WordRootsError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_load_morpheme_content",
            morpheme_id=morpheme_id,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
