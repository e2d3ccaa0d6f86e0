"""Pydantic schemas for morpheme suggestions."""

from pydantic import BaseModel, Field


class SuggestRequest(BaseModel):
    """Schema for requesting morpheme suggestions."""

    type: str = Field(..., min_length=1, description="Morpheme type to suggest for")
    input: str | None = Field(None, description="Optional text to narrow suggestions")


class SuggestionItem(BaseModel):
    """Schema for a single suggested morpheme."""

    id: str = Field(..., description="Suggested morpheme token")
    meaning: str = Field("", description="Short meaning of the morpheme")

    model_config = {"from_attributes": True}


class SuggestionsResponse(BaseModel):
    """Schema for morpheme suggestions response."""

    suggestions: list[SuggestionItem] = Field(..., description="Suggested morphemes")
