"""Result-related Pydantic models."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResultCreate(BaseModel):
    """Model for submitting a completed attempt.

    ``attemptId`` is generated by the server; a client-supplied one is dropped.
    ``answers`` maps question id to chosen option, ``questionTimes`` maps
    question id to time spent; both are stored as sent.
    """

    model_config = ConfigDict(extra="ignore")

    testId: str = Field(..., min_length=1)
    testName: str | None = None
    userId: str | None = None
    totalQuestions: int | None = None
    correct: int | None = None
    wrong: int | None = None
    skipped: int | None = None
    totalScore: float | None = None
    percentage: float = 0.0
    totalTime: str | None = None
    answers: dict[str, Any] = Field(default_factory=dict)
    questionTimes: dict[str, Any] = Field(default_factory=dict)
    resultsData: list[dict[str, Any]] = Field(default_factory=list)
    completedAt: datetime | None = None

    @field_validator("percentage", mode="before")
    @classmethod
    def missing_percentage_is_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class TestStats(BaseModel):
    """Aggregate over the results of one test."""

    attempts: int = 0
    best: float = 0
    last: float = 0
    average: float = 0


class HistoryEntry(BaseModel):
    """Per-test summary across all attempts."""

    attempts: int = 0
    best: float = 0
    last: float = 0
    lastAttemptId: str | None = None
