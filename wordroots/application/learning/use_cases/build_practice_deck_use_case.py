"""Use case for assembling a practice deck from every stored lesson."""

import asyncio
import random

import structlog

from wordroots.application.learning.protocols.content_store import ContentStoreProtocol
from wordroots.application.learning.use_cases.dtos.practice_dtos import PracticeDeck
from wordroots.domain.learning.entities.morpheme_content import MorphemeContent
from wordroots.domain.learning.entities.quiz_question import TaggedWord
from wordroots.domain.learning.entities.quiz_session import QuizSession
from wordroots.domain.learning.services.quiz_generator import QuizGenerator
from wordroots.exceptions import CorruptRecordError, NotFoundError

logger = structlog.get_logger(__name__)


class BuildPracticeDeckUseCase:
    """Collects the words of all registered morphemes and turns them into questions."""

    def __init__(
        self,
        content_store: ContentStoreProtocol,
        quiz_generator: QuizGenerator,
        rng: random.Random | None = None,
    ) -> None:
        self.content_store = content_store
        self.quiz_generator = quiz_generator
        self.rng = rng or random.Random()

    async def build(self) -> PracticeDeck:
        """
        Build a fresh deck.

        Morphemes without content, or with unreadable content, are skipped.

        Returns:
            The shuffled deck; empty when there is not enough content to quiz on
        """
        morphemes = await asyncio.to_thread(self.content_store.list_morphemes)
        contents = await asyncio.gather(*(self._load_content(m.id) for m in morphemes))

        tagged_words: list[TaggedWord] = []
        source_ids: list[str] = []
        skipped_ids: list[str] = []
        for morpheme, content in zip(morphemes, contents, strict=True):
            if content is None:
                skipped_ids.append(morpheme.id)
                continue
            source_ids.append(morpheme.id)
            tagged_words.extend(TaggedWord(word=w, source_id=morpheme.id) for w in content.words)

        questions = self.quiz_generator.generate(tagged_words)

        logger.info(
            "practice_deck_built",
            morpheme_count=len(morphemes),
            word_count=len(tagged_words),
            question_count=len(questions),
            skipped=skipped_ids,
        )
        return PracticeDeck(
            questions=questions,
            word_count=len(tagged_words),
            source_ids=source_ids,
            skipped_ids=skipped_ids,
        )

    async def start_session(self) -> QuizSession:
        """Build a deck and wrap it in a session runner."""
        deck = await self.build()
        return QuizSession(questions=deck.questions, rng=self.rng)

    async def _load_content(self, morpheme_id: str) -> MorphemeContent | None:
        try:
            return await asyncio.to_thread(self.content_store.get_content, morpheme_id)
        except NotFoundError:
            logger.debug("practice_content_missing", morpheme_id=morpheme_id)
            return None
        except CorruptRecordError as e:
            logger.warning("practice_content_unreadable", morpheme_id=morpheme_id, error=e.reason)
            return None
