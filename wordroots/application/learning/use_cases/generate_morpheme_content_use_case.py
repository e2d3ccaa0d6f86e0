"""Use case for adding a morpheme and generating its lesson content."""

import asyncio
import dataclasses

import structlog

from wordroots.application.learning.protocols.content_store import ContentStoreProtocol
from wordroots.application.learning.protocols.vocab_generator import VocabGeneratorProtocol
from wordroots.application.learning.use_cases.dtos.generation_dtos import GenerationResult
from wordroots.domain.learning.entities.morpheme import Morpheme, MorphemeType

logger = structlog.get_logger(__name__)

PENDING_MESSAGE = "Added to list. Configure VOCAB_WEBHOOK_URL to enable AI generation."


class GenerateMorphemeContentUseCase:
    """
    Adds a morpheme to the registry and, when a generator is configured,
    stores freshly generated lesson content for it.
    """

    def __init__(
        self,
        content_store: ContentStoreProtocol,
        vocab_generator: VocabGeneratorProtocol | None = None,
    ) -> None:
        self.content_store = content_store
        self.vocab_generator = vocab_generator

    async def generate(self, raw_morpheme_id: str, morpheme_type: MorphemeType) -> GenerationResult:
        """
        Generate content for a morpheme, or register it as pending.

        Args:
            raw_morpheme_id: Morpheme token as typed by the learner
            morpheme_type: root, prefix or suffix

        Returns:
            The registered morpheme, whether it was new, and the content if generated

        Raises:
            ValidationError: If the morpheme id is not a valid token
            UpstreamError: If the generator answered with a failure status
            UpstreamTransportError: If the generator could not be reached
        """
        if self.vocab_generator is None:
            morpheme = Morpheme.pending(raw_morpheme_id, morpheme_type)
            registered = await asyncio.to_thread(self.content_store.register_morpheme, morpheme)
            logger.info(
                "morpheme_registered_pending",
                morpheme_id=morpheme.id,
                morpheme_type=morpheme_type,
                registered=registered,
            )
            return GenerationResult(
                morpheme=morpheme, registered=registered, message=PENDING_MESSAGE
            )

        morpheme_id = Morpheme.create(raw_morpheme_id, morpheme_type).id
        generated = await self.vocab_generator.generate_content(morpheme_id, morpheme_type)

        # Content is always stored under the id and type it was requested for
        content = dataclasses.replace(generated, id=morpheme_id, type=morpheme_type)
        await asyncio.to_thread(self.content_store.put_content, content)

        morpheme = Morpheme(id=morpheme_id, type=morpheme_type, meaning=content.meaning or "")
        registered = await asyncio.to_thread(self.content_store.register_morpheme, morpheme)

        logger.info(
            "morpheme_content_generated",
            morpheme_id=morpheme_id,
            morpheme_type=morpheme_type,
            word_count=len(content.words),
            registered=registered,
        )
        return GenerationResult(morpheme=morpheme, registered=registered, content=content)
