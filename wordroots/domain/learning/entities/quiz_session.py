"""
Quiz session runner: steps through a deck and keeps the score.
"""

import math
import random
from dataclasses import dataclass, field
from typing import Literal

from wordroots.domain.common.exceptions import ValidationError
from wordroots.domain.learning.entities.quiz_question import QuizQuestion

SessionState = Literal["empty", "in_progress", "completed"]


def score_percentage(score: int, answered: int) -> int:
    """
    Percentage of correct answers, rounded half up.

    Returns 0 when nothing was answered.
    """
    if answered <= 0:
        return 0
    return math.floor(score * 100 / answered + 0.5)


@dataclass
class QuizSession:
    """
    State machine over a question deck.

    States:
    - empty: the deck has no questions; terminal, no transitions
    - in_progress: index points at an unfinished question
    - completed: every question has been moved past

    Business Rules:
    - an answer is recorded at most once per question
    - next() is only accepted once the current question is answered
    - restart() reshuffles the same deck, it never regenerates it
    """

    questions: list[QuizQuestion]
    rng: random.Random = field(default_factory=random.Random, repr=False)
    index: int = 0
    score: int = 0
    answered_count: int = 0
    selected_option: int | None = None

    def __post_init__(self) -> None:
        # Restart shuffles in place; keep the caller's list untouched
        self.questions = list(self.questions)

    @property
    def state(self) -> SessionState:
        if not self.questions:
            return "empty"
        if self.index >= len(self.questions):
            return "completed"
        return "in_progress"

    @property
    def deck_size(self) -> int:
        return len(self.questions)

    @property
    def position(self) -> int:
        """1-based number of the current question."""
        return self.index + 1

    @property
    def current_question(self) -> QuizQuestion | None:
        if self.state != "in_progress":
            return None
        return self.questions[self.index]

    @property
    def is_answered(self) -> bool:
        return self.selected_option is not None

    @property
    def is_correct(self) -> bool | None:
        """Whether the selected option is right; None until an option is selected."""
        question = self.current_question
        if question is None or self.selected_option is None:
            return None
        return question.is_correct(self.selected_option)

    @property
    def percentage(self) -> int:
        return score_percentage(self.score, self.answered_count)

    def select_option(self, option_index: int) -> bool:
        """
        Record an answer for the current question.

        Repeated selections on an answered question are ignored.

        Args:
            option_index: Index into the current question's options

        Returns:
            True if the answer was recorded, False if it was ignored

        Raises:
            ValidationError: If option_index is outside the options
        """
        question = self.current_question
        if question is None or self.selected_option is not None:
            return False
        if not 0 <= option_index < len(question.options):
            raise ValidationError(
                "Option index out of range", field="option_index", value=option_index
            )

        self.selected_option = option_index
        self.answered_count += 1
        if question.is_correct(option_index):
            self.score += 1
        return True

    def next(self) -> bool:
        """Move past the current question once it has been answered."""
        if self.state != "in_progress" or self.selected_option is None:
            return False
        self.index += 1
        self.selected_option = None
        return True

    def restart(self) -> bool:
        """Reshuffle the deck and reset the score."""
        if self.state == "empty":
            return False
        self.rng.shuffle(self.questions)
        self.index = 0
        self.score = 0
        self.answered_count = 0
        self.selected_option = None
        return True
