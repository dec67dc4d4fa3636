"""Pydantic models."""
from testhub.models.results import HistoryEntry, ResultCreate, TestStats
from testhub.models.tests import QuestionPayload, TestCreate, TestUpdate

__all__ = [
    "HistoryEntry",
    "QuestionPayload",
    "ResultCreate",
    "TestCreate",
    "TestStats",
    "TestUpdate",
]
