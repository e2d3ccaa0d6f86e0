"""Tests for QuizGenerator."""

import random
from collections import Counter

import pytest

from tests.conftest import make_word
from wordroots.domain.learning.entities.quiz_question import TaggedWord, answer_for
from wordroots.domain.learning.services.quiz_generator import QuizGenerator


def _tag(*words, source_id="rupt"):
    return [TaggedWord(word=w, source_id=source_id) for w in words]


RUPT = ["interrupt", "erupt", "disrupt", "corrupt"]


class TestQuizGenerator:
    @pytest.fixture
    def generator(self) -> QuizGenerator:
        return QuizGenerator(rng=random.Random(42))

    def test_no_words_gives_empty_deck(self, generator):
        assert generator.generate([]) == []

    def test_single_word_gives_empty_deck(self, generator):
        assert generator.generate(_tag(make_word("erupt"))) == []

    def test_three_words_cannot_fill_distractors(self, generator):
        words = _tag(*(make_word(w) for w in ["interrupt", "erupt", "disrupt"]))
        assert generator.generate(words) == []

    def test_four_distinct_words_give_two_questions_each(self, generator):
        questions = generator.generate(_tag(*(make_word(w) for w in RUPT)))

        assert len(questions) == 8
        assert Counter(q.kind for q in questions) == {"meaning": 4, "breakdown": 4}
        assert Counter(q.word.word for q in questions) == {w: 2 for w in RUPT}

    def test_options_hold_the_answer_once(self, generator):
        words = _tag(*(make_word(w) for w in RUPT + ["abrupt", "rupture"]))

        for question in generator.generate(words):
            assert len(question.options) == 4
            assert len(set(question.options)) == 4
            assert question.options[question.correct_index] == answer_for(
                question.word, question.kind
            )
            assert question.options.count(question.expected_answer) == 1

    def test_distractors_come_from_other_words(self, generator):
        words = [make_word(w) for w in RUPT]
        meanings = {w.meaning_en for w in words}

        for question in generator.generate(_tag(*words)):
            if question.kind == "meaning":
                assert set(question.options) == meanings

    def test_question_text_names_the_word(self, generator):
        questions = generator.generate(_tag(*(make_word(w) for w in RUPT)))

        texts = {(q.kind, q.word.word): q.question_text for q in questions}
        assert texts[("meaning", "erupt")] == 'What does "erupt" mean?'
        assert texts[("breakdown", "erupt")] == (
            'What is the morphological breakdown of "erupt"?'
        )

    def test_shared_meaning_starves_meaning_questions(self, generator):
        words = [
            make_word("interrupt", meaning_en="to break"),
            make_word("disrupt", meaning_en="to break"),
            make_word("erupt"),
            make_word("corrupt"),
        ]

        questions = generator.generate(_tag(*words))

        assert [q.kind for q in questions] == ["breakdown"] * 4

    def test_same_spelling_is_not_its_own_distractor(self, generator):
        words = [
            TaggedWord(word=make_word("erupt", meaning_en="burst out"), source_id="rupt"),
            TaggedWord(word=make_word("erupt", meaning_en="break out"), source_id="e-"),
            TaggedWord(word=make_word("corrupt"), source_id="rupt"),
            TaggedWord(word=make_word("disrupt"), source_id="rupt"),
        ]

        questions = generator.generate(words)

        assert all(q.word.word != "erupt" for q in questions if q.kind == "meaning")

    def test_questions_keep_source_morpheme(self, generator):
        words = _tag(*(make_word(w) for w in RUPT[:2])) + _tag(
            make_word("inscribe"), make_word("describe"), source_id="scrib"
        )

        sources = {q.word.word: q.source_id for q in generator.generate(words)}

        assert sources == {
            "interrupt": "rupt",
            "erupt": "rupt",
            "inscribe": "scrib",
            "describe": "scrib",
        }

    def test_same_seed_gives_same_deck(self):
        words = _tag(*(make_word(w) for w in RUPT + ["abrupt"]))

        first = QuizGenerator(rng=random.Random(7)).generate(words)
        second = QuizGenerator(rng=random.Random(7)).generate(words)

        assert first == second
