"""
Test document model.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import sqlalchemy as sa
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from testhub.database import Base


class Test(Base):
    """
    A named set of questions with timing and subject metadata.
    Questions are embedded as a JSON list and have no identity of their own.
    """

    __tablename__ = "tests"

    pk: Mapped[int] = mapped_column(primary_key=True)
    test_id: Mapped[str] = mapped_column(
        String(128), unique=True, index=True, nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    duration: Mapped[float] = mapped_column(nullable=False)  # minutes
    questions: Mapped[list[dict[str, Any]]] = mapped_column(
        sa.JSON, default=list, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    @property
    def question_count(self) -> int:
        return len(self.questions or [])
