"""Mapper for Morpheme schema ↔ Domain conversion."""

from wordroots.domain.learning.entities.morpheme import Morpheme
from wordroots.infrastructure.learning.schemas import Morpheme as MorphemeSchema


class MorphemeMapper:
    """Mapper for Morpheme schema ↔ Domain conversion."""

    def to_domain(self, schema: MorphemeSchema) -> Morpheme:
        """Convert a validated registry entry to a domain entity."""
        return Morpheme(id=schema.id, type=schema.type, meaning=schema.meaning)

    def to_schema(self, entity: Morpheme) -> MorphemeSchema:
        """Convert a domain entity to its registry/API schema."""
        return MorphemeSchema(id=entity.id, type=entity.type, meaning=entity.meaning)
