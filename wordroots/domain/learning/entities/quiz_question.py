"""
Multiple-choice practice questions derived from vocabulary words.
"""

from dataclasses import dataclass
from typing import Literal

from wordroots.domain.common.exceptions import InvariantViolationError
from wordroots.domain.learning.entities.morpheme_content import VocabularyWord

QuestionKind = Literal["meaning", "breakdown"]

OPTION_COUNT = 4


@dataclass(frozen=True)
class TaggedWord:
    """A vocabulary word together with the morpheme it was taken from."""

    word: VocabularyWord
    source_id: str


@dataclass(frozen=True)
class QuizQuestion:
    """
    A single multiple-choice question.

    Questions are derived per session and never persisted.
    The option at correct_index is the ground-truth value of the word
    for the question kind, and no option appears twice.
    """

    kind: QuestionKind
    word: VocabularyWord
    question_text: str
    options: tuple[str, ...]
    correct_index: int
    source_id: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        if len(self.options) != OPTION_COUNT:
            raise InvariantViolationError(
                "QuizQuestion", f"expected {OPTION_COUNT} options, got {len(self.options)}"
            )
        if len(set(self.options)) != len(self.options):
            raise InvariantViolationError("QuizQuestion", "options must be distinct")
        if not 0 <= self.correct_index < len(self.options):
            raise InvariantViolationError("QuizQuestion", "correct_index out of range")
        if self.options[self.correct_index] != self.expected_answer:
            raise InvariantViolationError(
                "QuizQuestion", "correct option does not match the word"
            )

    @property
    def expected_answer(self) -> str:
        """Ground-truth value of the word for this question kind."""
        return answer_for(self.word, self.kind)

    def is_correct(self, option_index: int) -> bool:
        return option_index == self.correct_index


def answer_for(word: VocabularyWord, kind: QuestionKind) -> str:
    """Return the field of a word that a question of the given kind asks about."""
    if kind == "meaning":
        return word.meaning_en
    return word.breakdown
