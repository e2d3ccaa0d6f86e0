"""API routes for the morpheme registry."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from wordroots.application.learning.use_cases.morpheme_catalog_use_case import (
    MorphemeCatalogUseCase,
)
from wordroots.core import container
from wordroots.domain.common.exceptions import DomainError
from wordroots.exceptions import WordRootsError
from wordroots.infrastructure.common.di import inject_use_case
from wordroots.infrastructure.learning.mappers.morpheme_mapper import MorphemeMapper
from wordroots.infrastructure.learning.schemas import Morpheme, MorphemeTypeField

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/morphemes", tags=["morphemes"])


@router.get(
    "",
    response_model=list[Morpheme],
    status_code=status.HTTP_200_OK,
)
def list_morphemes(
    type: MorphemeTypeField | None = None,
    use_case: MorphemeCatalogUseCase = Depends(
        inject_use_case(container.morpheme_catalog_use_case)
    ),
) -> list[Morpheme]:
    """
    List registered morphemes in registry order.

    Args:
        type: Optional morpheme type filter (root, prefix, suffix)
        use_case: MorphemeCatalogUseCase injected via dependency container

    Returns:
        Registered morphemes
    """
    try:
        mapper = MorphemeMapper()
        return [mapper.to_schema(m) for m in use_case.list_morphemes(type)]
    except (WordRootsError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_list_morphemes", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
