"""Service layer for attempt results and derived statistics."""
import logging
import secrets
import string
from typing import Iterable

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DbSession

from testhub.models import HistoryEntry, ResultCreate, TestStats
from testhub.models.db import Result
from testhub.utils import ensure_utc, epoch_millis, utc_now

logger = logging.getLogger(__name__)

ATTEMPT_ID_PREFIX = "attempt-"
ATTEMPT_SUFFIX_LENGTH = 9
_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def generate_attempt_id() -> str:
    """Build ``attempt-<epoch ms>-<9 random base-36 chars>``."""
    suffix = "".join(
        secrets.choice(_BASE36_ALPHABET) for _ in range(ATTEMPT_SUFFIX_LENGTH)
    )
    return f"{ATTEMPT_ID_PREFIX}{epoch_millis()}-{suffix}"


def _newest_first(stmt):
    return stmt.order_by(Result.completed_at.desc(), Result.pk.desc())


def create_result(db: DbSession, payload: ResultCreate) -> Result:
    """Store a submitted attempt under a freshly generated attempt id."""
    attempt_id = generate_attempt_id()
    result = Result(
        attempt_id=attempt_id,
        test_id=payload.testId,
        test_name=payload.testName,
        user_id=payload.userId,
        total_questions=payload.totalQuestions,
        correct=payload.correct,
        wrong=payload.wrong,
        skipped=payload.skipped,
        total_score=payload.totalScore,
        percentage=payload.percentage,
        total_time=payload.totalTime,
        answers=payload.answers,
        question_times=payload.questionTimes,
        results_data=payload.resultsData,
        completed_at=ensure_utc(payload.completedAt) if payload.completedAt else utc_now(),
    )
    db.add(result)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Attempt id '{attempt_id}' already exists",
        )
    db.refresh(result)
    logger.info(
        f"Saved result {result.attempt_id} for test {result.test_id} "
        f"({result.percentage}%)"
    )
    return result


def list_results_for_test(db: DbSession, test_id: str) -> list[Result]:
    """List results of one test, most recently completed first."""
    stmt = _newest_first(select(Result).where(Result.test_id == test_id))
    return list(db.execute(stmt).scalars().all())


def compute_stats(results: list[Result]) -> TestStats:
    """Aggregate results ordered newest first."""
    if not results:
        return TestStats()
    percentages = [result.percentage for result in results]
    return TestStats(
        attempts=len(results),
        best=max(percentages),
        last=percentages[0],
        average=round(sum(percentages) / len(percentages), 2),
    )


def get_result(db: DbSession, attempt_id: str) -> Result:
    """Get result by attempt id or raise 404."""
    stmt = select(Result).where(Result.attempt_id == attempt_id)
    result = db.execute(stmt).scalar_one_or_none()
    if result is None:
        raise HTTPException(status_code=404, detail="Result not found")
    return result


def build_history(results: Iterable[Result]) -> dict[str, HistoryEntry]:
    """Fold results ordered newest first into a per-test summary."""
    history: dict[str, HistoryEntry] = {}
    for result in results:
        entry = history.get(result.test_id)
        if entry is None:
            # first one seen is the most recent attempt
            entry = HistoryEntry(
                last=result.percentage,
                lastAttemptId=result.attempt_id,
            )
            history[result.test_id] = entry
        entry.attempts += 1
        if result.percentage > entry.best:
            entry.best = result.percentage
    return history


def load_history(db: DbSession) -> dict[str, HistoryEntry]:
    """Summarize every stored result by test."""
    stmt = _newest_first(select(Result))
    return build_history(db.execute(stmt).scalars())
