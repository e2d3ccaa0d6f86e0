from typing import Protocol

from wordroots.domain.learning.entities.morpheme import MorphemeType
from wordroots.domain.learning.entities.morpheme_content import MorphemeContent
from wordroots.domain.learning.services.suggestion_fallback import MorphemeSuggestion


class VocabGeneratorProtocol(Protocol):
    async def generate_content(
        self, morpheme_id: str, morpheme_type: MorphemeType
    ) -> MorphemeContent: ...

    async def suggest(
        self, category: str, query: str, existing_ids: list[str]
    ) -> list[MorphemeSuggestion]: ...
