"""DTOs for practice deck use cases."""

from dataclasses import dataclass, field

from wordroots.domain.learning.entities.quiz_question import QuizQuestion


@dataclass
class PracticeDeck:
    """A generated deck plus the morphemes whose content fed it."""

    questions: list[QuizQuestion]
    word_count: int
    source_ids: list[str] = field(default_factory=list)
    skipped_ids: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.questions
