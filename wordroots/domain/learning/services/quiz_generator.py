"""Domain service for building multiple-choice practice decks."""

import random
from collections.abc import Sequence

from wordroots.domain.learning.entities.quiz_question import (
    OPTION_COUNT,
    QuestionKind,
    QuizQuestion,
    TaggedWord,
    answer_for,
)

MIN_WORDS = 2
DISTRACTOR_COUNT = OPTION_COUNT - 1

QUESTION_TEMPLATES: dict[QuestionKind, str] = {
    "meaning": 'What does "{word}" mean?',
    "breakdown": 'What is the morphological breakdown of "{word}"?',
}


class QuizGenerator:
    """
    Stateless domain service that turns vocabulary words into quiz questions.

    Every word yields at most one meaning question and one breakdown question.
    A question kind is skipped for a word when the other words do not offer
    enough distinct alternatives to fill the distractor slots.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def generate(self, tagged_words: Sequence[TaggedWord]) -> list[QuizQuestion]:
        """
        Build a shuffled deck from a flattened word list.

        Args:
            tagged_words: Words with the id of the morpheme they came from

        Returns:
            Questions in random order; empty when fewer than two words are given
        """
        if len(tagged_words) < MIN_WORDS:
            return []

        questions: list[QuizQuestion] = []
        for tagged in tagged_words:
            for kind in QUESTION_TEMPLATES:
                question = self._build_question(tagged, tagged_words, kind)
                if question is not None:
                    questions.append(question)

        self.rng.shuffle(questions)
        return questions

    def _build_question(
        self,
        tagged: TaggedWord,
        tagged_words: Sequence[TaggedWord],
        kind: QuestionKind,
    ) -> QuizQuestion | None:
        answer = answer_for(tagged.word, kind)
        alternatives = self._distinct_alternatives(tagged, tagged_words, kind)
        if len(alternatives) < DISTRACTOR_COUNT:
            return None

        options = [answer, *self.rng.sample(alternatives, DISTRACTOR_COUNT)]
        self.rng.shuffle(options)

        return QuizQuestion(
            kind=kind,
            word=tagged.word,
            question_text=QUESTION_TEMPLATES[kind].format(word=tagged.word.word),
            options=tuple(options),
            correct_index=options.index(answer),
            source_id=tagged.source_id,
        )

    @staticmethod
    def _distinct_alternatives(
        tagged: TaggedWord,
        tagged_words: Sequence[TaggedWord],
        kind: QuestionKind,
    ) -> list[str]:
        """Distinct values of the other words, in first-seen order."""
        answer = answer_for(tagged.word, kind)
        # Words are compared by their spelling, not by object identity
        values = (
            answer_for(other.word, kind)
            for other in tagged_words
            if other.word.word != tagged.word.word
        )
        return [value for value in dict.fromkeys(values) if value != answer]
