"""Database models."""
from testhub.models.db.result import Result
from testhub.models.db.test import Test

__all__ = [
    "Result",
    "Test",
]
