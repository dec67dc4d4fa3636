from __future__ import annotations

from typing import Any, Iterable

from testhub.models.db import Result, Test
from testhub.models.tests import QuestionPayload
from testhub.utils import isoformat_utc


def questions_to_documents(questions: Iterable[QuestionPayload]) -> list[dict[str, Any]]:
    # Fields the caller never sent stay absent from the stored document
    return [question.model_dump(exclude_unset=True) for question in questions]


def serialize_test(test: Test) -> dict[str, Any]:
    return {
        "id": test.test_id,
        "name": test.name,
        "subject": test.subject,
        "duration": test.duration,
        "questions": list(test.questions or []),
        "createdAt": isoformat_utc(test.created_at),
        "updatedAt": isoformat_utc(test.updated_at),
    }


def serialize_result(result: Result) -> dict[str, Any]:
    return {
        "attemptId": result.attempt_id,
        "testId": result.test_id,
        "testName": result.test_name,
        "userId": result.user_id,
        "totalQuestions": result.total_questions,
        "correct": result.correct,
        "wrong": result.wrong,
        "skipped": result.skipped,
        "totalScore": result.total_score,
        "percentage": result.percentage,
        "totalTime": result.total_time,
        "answers": dict(result.answers or {}),
        "questionTimes": dict(result.question_times or {}),
        "resultsData": list(result.results_data or []),
        "completedAt": isoformat_utc(result.completed_at),
    }
