"""Mapper for MorphemeContent schema ↔ Domain conversion."""

import dataclasses

from wordroots.domain.learning.entities.morpheme_content import (
    Collocation,
    MemoryLogic,
    MemoryTableRow,
    MorphemeContent,
    VocabularyWord,
    WordForm,
    WordPart,
)
from wordroots.infrastructure.learning import schemas


class MorphemeContentMapper:
    """Mapper for MorphemeContent schema ↔ Domain conversion."""

    def to_domain(self, schema: schemas.MorphemeContent) -> MorphemeContent:
        """Convert validated lesson content to a domain entity."""
        return MorphemeContent(
            id=schema.id,
            type=schema.type,
            meaning=schema.meaning,
            origin=schema.origin,
            explanation=schema.explanation,
            level_note=schema.level_note,
            words=[self._word_to_domain(w) for w in schema.words],
            memory_logic=MemoryLogic(
                root=schema.memory_logic.root,
                meaning=schema.memory_logic.meaning,
                table=[
                    MemoryTableRow(
                        result=row.result,
                        prefix=row.prefix,
                        prefix_meaning=row.prefix_meaning,
                        suffix=row.suffix,
                        suffix_meaning=row.suffix_meaning,
                    )
                    for row in schema.memory_logic.table
                ],
            ),
        )

    def to_schema(self, entity: MorphemeContent) -> schemas.MorphemeContent:
        """Convert a domain entity to its storage/API schema."""
        return schemas.MorphemeContent.model_validate(dataclasses.asdict(entity))

    @staticmethod
    def _word_to_domain(word: schemas.VocabularyWord) -> VocabularyWord:
        return VocabularyWord(
            word=word.word,
            level=word.level,
            breakdown=word.breakdown,
            logic=word.logic,
            meaning_en=word.meaning_en,
            meaning_vi=word.meaning_vi,
            example=word.example,
            parts=[WordPart(part=p.part, meaning=p.meaning) for p in word.parts],
            collocations=[
                Collocation(phrase=c.phrase, example=c.example) for c in word.collocations
            ],
            forms=[WordForm(word=f.word, type=f.type, example=f.example) for f in word.forms],
        )
