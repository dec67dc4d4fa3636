"""
Result document model for completed test attempts.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import sqlalchemy as sa
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from testhub.database import Base


class Result(Base):
    """
    Record of one completed run through a test.

    ``test_id`` is a plain reference: results may outlive their test.
    """

    __tablename__ = "results"

    pk: Mapped[int] = mapped_column(primary_key=True)
    attempt_id: Mapped[str] = mapped_column(
        String(64), unique=True, index=True, nullable=False
    )
    test_id: Mapped[str] = mapped_column(String(128), index=True, nullable=False)
    test_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_id: Mapped[str | None] = mapped_column(String(128), nullable=True)

    # Counts and score
    total_questions: Mapped[int | None] = mapped_column(nullable=True)
    correct: Mapped[int | None] = mapped_column(nullable=True)
    wrong: Mapped[int | None] = mapped_column(nullable=True)
    skipped: Mapped[int | None] = mapped_column(nullable=True)
    total_score: Mapped[float | None] = mapped_column(nullable=True)
    percentage: Mapped[float] = mapped_column(default=0.0, nullable=False)
    total_time: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # Free-form attempt detail
    answers: Mapped[dict[str, Any]] = mapped_column(sa.JSON, default=dict, nullable=False)
    question_times: Mapped[dict[str, Any]] = mapped_column(
        sa.JSON, default=dict, nullable=False
    )
    results_data: Mapped[list[dict[str, Any]]] = mapped_column(
        sa.JSON, default=list, nullable=False
    )

    completed_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True,
        nullable=False,
    )
