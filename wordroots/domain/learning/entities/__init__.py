"""Learning context entities."""

from wordroots.domain.learning.entities.morpheme import (
    MORPHEME_TYPES,
    PENDING_MEANING,
    Morpheme,
    MorphemeType,
)
from wordroots.domain.learning.entities.morpheme_content import (
    Collocation,
    MemoryLogic,
    MemoryTableRow,
    MorphemeContent,
    VocabularyWord,
    WordForm,
    WordPart,
)
from wordroots.domain.learning.entities.quiz_question import QuestionKind, QuizQuestion, TaggedWord
from wordroots.domain.learning.entities.quiz_session import QuizSession, SessionState

__all__ = [
    "MORPHEME_TYPES",
    "PENDING_MEANING",
    "Collocation",
    "MemoryLogic",
    "MemoryTableRow",
    "Morpheme",
    "MorphemeContent",
    "MorphemeType",
    "QuestionKind",
    "QuizQuestion",
    "QuizSession",
    "SessionState",
    "TaggedWord",
    "VocabularyWord",
    "WordForm",
    "WordPart",
]
