"""Use case for suggesting new morphemes to learn."""

import asyncio

import structlog

from wordroots.application.learning.protocols.content_store import ContentStoreProtocol
from wordroots.application.learning.protocols.vocab_generator import VocabGeneratorProtocol
from wordroots.domain.learning.services.suggestion_fallback import (
    MorphemeSuggestion,
    SuggestionFallbackTable,
)
from wordroots.exceptions import UpstreamError

logger = structlog.get_logger(__name__)


class SuggestMorphemesUseCase:
    """
    Suggests morphemes the learner has not added yet.

    The generator is asked first when configured; any failure there is
    answered from the static fallback table instead.
    """

    def __init__(
        self,
        content_store: ContentStoreProtocol,
        fallback_table: SuggestionFallbackTable,
        vocab_generator: VocabGeneratorProtocol | None = None,
    ) -> None:
        self.content_store = content_store
        self.fallback_table = fallback_table
        self.vocab_generator = vocab_generator

    async def suggest(self, category: str, query: str | None = None) -> list[MorphemeSuggestion]:
        """
        Suggest morphemes for a category.

        Args:
            category: Morpheme type the learner is browsing
            query: Optional free text typed by the learner

        Returns:
            Suggested morphemes, excluding ones already registered under the category
        """
        morphemes = await asyncio.to_thread(self.content_store.list_morphemes)
        existing_ids = [m.id for m in morphemes if m.type == category]

        if self.vocab_generator is not None:
            try:
                suggestions = await self.vocab_generator.suggest(
                    category, query or "", existing_ids
                )
                logger.info(
                    "morpheme_suggestions_generated",
                    category=category,
                    suggestion_count=len(suggestions),
                )
                return suggestions
            except UpstreamError as e:
                logger.warning(
                    "morpheme_suggestions_fallback",
                    category=category,
                    error=e.message,
                    upstream_status=e.upstream_status,
                )

        return self.fallback_table.suggest(category, existing_ids, query)
