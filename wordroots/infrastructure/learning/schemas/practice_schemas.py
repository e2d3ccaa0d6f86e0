"""Pydantic schemas for practice decks."""

from typing import Literal

from pydantic import BaseModel, Field


class PracticeQuestion(BaseModel):
    """Schema for one multiple-choice question."""

    kind: Literal["meaning", "breakdown"]
    word: str = Field(..., description="The word being asked about")
    level: str = Field("", description="CEFR band of the word")
    question: str = Field(..., description="Question text")
    options: list[str] = Field(..., description="Four answer options")
    correct_index: int = Field(..., description="Index of the correct option")
    source: str = Field(..., description="Id of the morpheme the word came from")


class PracticeQuestionsResponse(BaseModel):
    """Schema for a freshly generated practice deck."""

    questions: list[PracticeQuestion]
    total: int = Field(..., description="Number of questions in the deck")
