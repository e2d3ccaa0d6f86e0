"""Protocol for the morpheme content store in learning context."""

from typing import Protocol

from wordroots.domain.learning.entities.morpheme import Morpheme
from wordroots.domain.learning.entities.morpheme_content import MorphemeContent


class ContentStoreProtocol(Protocol):
    """Protocol for morpheme registry and lesson content persistence."""

    def list_morphemes(self) -> list[Morpheme]:
        """
        Get every registered morpheme in registry order.

        Raises:
            MorphemeRegistryNotFoundError: If the registry is missing or unreadable
        """
        ...

    def get_content(self, morpheme_id: str) -> MorphemeContent:
        """
        Get the lesson content for a morpheme.

        Raises:
            MorphemeContentNotFoundError: If no content is stored for the id
        """
        ...

    def put_content(self, content: MorphemeContent) -> None:
        """Create or replace the content record for content.id atomically."""
        ...

    def register_morpheme(self, morpheme: Morpheme) -> bool:
        """
        Append a morpheme to the registry unless its id is already present.

        Returns:
            True if the morpheme was added, False if it was already registered
        """
        ...
