"""Pydantic schemas for morpheme registry entries and lesson content.

The same schemas validate JSON files on disk, webhook payloads and API responses.
"""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

MorphemeTypeField = Literal["root", "prefix", "suffix"]


class Morpheme(BaseModel):
    """Schema for a morpheme registry entry."""

    id: str = Field(..., min_length=1, description="Unique lowercase morpheme token")
    type: MorphemeTypeField = Field(..., description="root, prefix or suffix")
    meaning: str = Field("", description="Short meaning of the morpheme")

    model_config = {"from_attributes": True}


class WordPart(BaseModel):
    part: str
    meaning: str


class Collocation(BaseModel):
    phrase: str
    example: str = ""


class WordForm(BaseModel):
    word: str
    type: str = Field(..., description="Part of speech: n, v, adj, adv")
    example: str = ""


class VocabularyWord(BaseModel):
    """Schema for a vocabulary word inside lesson content."""

    word: str = Field(..., min_length=1)
    level: str = Field("", description="CEFR band such as B1, B2, C1")
    breakdown: str = Field(..., description="Morphological breakdown, e.g. inter + rupt + ion")
    parts: list[WordPart] = Field(default_factory=list)
    logic: str = ""
    meaning_en: str = Field(..., description="English definition")
    meaning_vi: str = ""
    example: str = ""
    collocations: list[Collocation] = Field(default_factory=list)
    forms: list[WordForm] = Field(default_factory=list)


class MemoryTableRow(BaseModel):
    """Schema for one memory table row; carries a prefix pair or a suffix pair."""

    prefix: str | None = None
    prefix_meaning: str | None = None
    suffix: str | None = None
    suffix_meaning: str | None = None
    result: str

    @model_validator(mode="after")
    def check_single_affix(self) -> "MemoryTableRow":
        """Require exactly one affix pair."""
        if (self.prefix is None) == (self.suffix is None):
            msg = "row must carry exactly one of prefix or suffix"
            raise ValueError(msg)
        return self


class MemoryLogic(BaseModel):
    root: str
    meaning: str
    table: list[MemoryTableRow] = Field(default_factory=list)


class MorphemeContent(BaseModel):
    """Schema for the full lesson payload of one morpheme."""

    id: str = Field(..., min_length=1)
    type: MorphemeTypeField
    meaning: str
    origin: str = ""
    explanation: str = ""
    level_note: str = ""
    words: list[VocabularyWord]
    memory_logic: MemoryLogic
