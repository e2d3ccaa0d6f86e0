"""Mapper for QuizQuestion → practice schema conversion."""

from wordroots.domain.learning.entities.quiz_question import QuizQuestion
from wordroots.infrastructure.learning.schemas import PracticeQuestion


class QuizQuestionMapper:
    """Questions are never read back, so only the outbound direction exists."""

    def to_schema(self, question: QuizQuestion) -> PracticeQuestion:
        return PracticeQuestion(
            kind=question.kind,
            word=question.word.word,
            level=question.word.level,
            question=question.question_text,
            options=list(question.options),
            correct_index=question.correct_index,
            source=question.source_id,
        )
