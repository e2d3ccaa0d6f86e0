from .generation_dtos import GenerationResult
from .practice_dtos import PracticeDeck

__all__ = [
    "GenerationResult",
    "PracticeDeck",
]
