"""DTOs for morpheme generation use cases."""

from dataclasses import dataclass

from wordroots.domain.learning.entities.morpheme import Morpheme
from wordroots.domain.learning.entities.morpheme_content import MorphemeContent


@dataclass
class GenerationResult:
    """Outcome of adding a morpheme, with content when a generator produced it."""

    morpheme: Morpheme
    registered: bool
    content: MorphemeContent | None = None
    message: str | None = None
