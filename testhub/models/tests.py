"""Test-related Pydantic models."""
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

OptionText = Annotated[str, BeforeValidator(str)]


class QuestionPayload(BaseModel):
    """Question embedded in a test."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    instructions: str | None = None
    instructionImage: str | None = None
    instructionImageHeight: float | None = None
    questionEn: str | None = None
    questionHi: str | None = None
    options: list[OptionText] | None = None
    correctAnswer: int | None = None
    solution: str | None = None
    solutionImage: str | None = None


class TestCreate(BaseModel):
    """Model for creating a new test."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    duration: float
    questions: list[QuestionPayload] = Field(default_factory=list)
    createdAt: datetime | None = None


class TestUpdate(BaseModel):
    """Model for updating a test; only supplied fields change."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = Field(None, min_length=1)
    name: str | None = Field(None, min_length=1)
    subject: str | None = Field(None, min_length=1)
    duration: float | None = None
    questions: list[QuestionPayload] | None = None
