"""Pydantic schemas for morpheme generation requests and responses."""

from pydantic import BaseModel, Field

from wordroots.infrastructure.learning.schemas.content_schemas import (
    MorphemeContent,
    MorphemeTypeField,
)


class GenerateRequest(BaseModel):
    """Schema for adding a morpheme and generating its content."""

    morpheme: str = Field(..., min_length=1, description="Morpheme token to add")
    type: MorphemeTypeField = Field(..., description="root, prefix or suffix")


class GenerateResponse(BaseModel):
    """Schema for the generation response."""

    success: bool = Field(..., description="Whether the morpheme was added")
    content: MorphemeContent | None = Field(None, description="Generated lesson content")
    message: str | None = Field(None, description="Notice when no content was generated")
