"""Use case for reading the morpheme registry and lesson content."""

import structlog

from wordroots.application.learning.protocols.content_store import ContentStoreProtocol
from wordroots.domain.learning.entities.morpheme import (
    Morpheme,
    MorphemeType,
    validate_morpheme_id,
)
from wordroots.domain.learning.entities.morpheme_content import MorphemeContent

logger = structlog.get_logger(__name__)


class MorphemeCatalogUseCase:
    """Read-side queries over the content store."""

    def __init__(self, content_store: ContentStoreProtocol) -> None:
        self.content_store = content_store

    def list_morphemes(self, morpheme_type: MorphemeType | None = None) -> list[Morpheme]:
        """
        List registered morphemes in registry order.

        Args:
            morpheme_type: Only return morphemes of this type when given

        Returns:
            Registered morphemes
        """
        morphemes = self.content_store.list_morphemes()
        if morpheme_type is not None:
            morphemes = [m for m in morphemes if m.type == morpheme_type]
        return morphemes

    def get_content(self, morpheme_id: str) -> MorphemeContent:
        """
        Get lesson content for one morpheme.

        Raises:
            ValidationError: If the id is not a valid morpheme token
            MorphemeContentNotFoundError: If the morpheme has no content yet
        """
        validate_morpheme_id(morpheme_id)
        content = self.content_store.get_content(morpheme_id)
        logger.debug("morpheme_content_loaded", morpheme_id=morpheme_id, words=len(content.words))
        return content
