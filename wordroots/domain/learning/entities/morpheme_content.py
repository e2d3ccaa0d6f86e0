"""
Lesson content for a morpheme: explanation, vocabulary words and memory table.
"""

from dataclasses import dataclass, field

from wordroots.domain.common.exceptions import InvariantViolationError, ValidationError
from wordroots.domain.learning.entities.morpheme import MorphemeType, validate_morpheme_id


@dataclass(frozen=True)
class WordPart:
    part: str
    meaning: str


@dataclass(frozen=True)
class Collocation:
    phrase: str
    example: str


@dataclass(frozen=True)
class WordForm:
    word: str
    type: str  # n, v, adj, adv
    example: str


@dataclass(frozen=True)
class VocabularyWord:
    """A vocabulary word built from the morpheme, with its breakdown and usage."""

    word: str
    level: str  # CEFR band: B1, B2, C1, ...
    breakdown: str
    logic: str
    meaning_en: str
    meaning_vi: str
    example: str
    parts: list[WordPart] = field(default_factory=list)
    collocations: list[Collocation] = field(default_factory=list)
    forms: list[WordForm] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.word or not self.word.strip():
            raise ValidationError("Vocabulary word cannot be empty", field="word")


@dataclass(frozen=True)
class MemoryTableRow:
    """
    One row of the memory table: an affix combined with the root.

    A row carries either a prefix pair or a suffix pair, never both.
    """

    result: str
    prefix: str | None = None
    prefix_meaning: str | None = None
    suffix: str | None = None
    suffix_meaning: str | None = None

    def __post_init__(self) -> None:
        has_prefix = self.prefix is not None
        has_suffix = self.suffix is not None
        if has_prefix == has_suffix:
            raise InvariantViolationError(
                "MemoryTableRow", "row must carry exactly one of prefix or suffix"
            )
        if has_prefix and self.prefix_meaning is None:
            raise InvariantViolationError("MemoryTableRow", "prefix requires prefix_meaning")
        if has_suffix and self.suffix_meaning is None:
            raise InvariantViolationError("MemoryTableRow", "suffix requires suffix_meaning")

    @property
    def affix(self) -> str:
        return self.prefix if self.prefix is not None else self.suffix  # type: ignore[return-value]


@dataclass(frozen=True)
class MemoryLogic:
    root: str
    meaning: str
    table: list[MemoryTableRow] = field(default_factory=list)


@dataclass(frozen=True)
class MorphemeContent:
    """
    Full lesson payload for one morpheme.

    Business Rules:
    - id matches the registry id of the owning morpheme
    - word strings are unique within one content record
    - an empty word list is valid (nothing to practise yet)
    """

    id: str
    type: MorphemeType
    meaning: str
    origin: str
    explanation: str
    level_note: str
    memory_logic: MemoryLogic
    words: list[VocabularyWord] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        validate_morpheme_id(self.id)
        seen: set[str] = set()
        for vocabulary_word in self.words:
            if vocabulary_word.word in seen:
                raise InvariantViolationError(
                    "MorphemeContent", f"duplicate word '{vocabulary_word.word}'"
                )
            seen.add(vocabulary_word.word)

    def belongs_to(self, morpheme_id: str) -> bool:
        return self.id == morpheme_id
