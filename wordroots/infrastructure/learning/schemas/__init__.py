"""Learning context schemas."""

from wordroots.infrastructure.learning.schemas.content_schemas import (
    Collocation,
    MemoryLogic,
    MemoryTableRow,
    Morpheme,
    MorphemeContent,
    MorphemeTypeField,
    VocabularyWord,
    WordForm,
    WordPart,
)
from wordroots.infrastructure.learning.schemas.generation_schemas import (
    GenerateRequest,
    GenerateResponse,
)
from wordroots.infrastructure.learning.schemas.practice_schemas import (
    PracticeQuestion,
    PracticeQuestionsResponse,
)
from wordroots.infrastructure.learning.schemas.suggestion_schemas import (
    SuggestionItem,
    SuggestionsResponse,
    SuggestRequest,
)

__all__ = [
    "Collocation",
    "GenerateRequest",
    "GenerateResponse",
    "MemoryLogic",
    "MemoryTableRow",
    "Morpheme",
    "MorphemeContent",
    "MorphemeTypeField",
    "PracticeQuestion",
    "PracticeQuestionsResponse",
    "SuggestRequest",
    "SuggestionItem",
    "SuggestionsResponse",
    "VocabularyWord",
    "WordForm",
    "WordPart",
]
