from .quiz_generator import QuizGenerator
from .suggestion_fallback import MorphemeSuggestion, SuggestionFallbackTable

__all__ = [
    "MorphemeSuggestion",
    "QuizGenerator",
    "SuggestionFallbackTable",
]
