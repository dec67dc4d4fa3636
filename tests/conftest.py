import os
import tempfile

# The store must be configured before testhub.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("DB_DIR", tempfile.mkdtemp(prefix="testhub-"))

import pytest
from fastapi.testclient import TestClient

from testhub.app import app
from testhub.database import Base, SessionLocal, engine, init_db


@pytest.fixture
def client():
    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    Base.metadata.drop_all(bind=engine)
    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sample_test() -> dict[str, object]:
    return {
        "id": "t1",
        "name": "Math",
        "subject": "Math",
        "duration": 60,
        "questions": [
            {
                "id": 1,
                "instructions": "Choose the correct answer",
                "instructionImageHeight": 120,
                "questionEn": "2 + 2 = ?",
                "questionHi": "2 + 2 = ?",
                "options": ["3", "4", "5", "22"],
                "correctAnswer": 1,
                "solution": "2 + 2 equals 4",
            },
            {
                "id": 2,
                "questionEn": "5 * 3 = ?",
                "options": ["8", "15"],
                "correctAnswer": 1,
            },
        ],
    }


def make_result(test_id: str, percentage: float, /, **extra: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "testId": test_id,
        "testName": "Math",
        "totalQuestions": 10,
        "correct": round(percentage / 10),
        "wrong": 10 - round(percentage / 10),
        "skipped": 0,
        "totalScore": percentage / 10,
        "percentage": percentage,
        "totalTime": "12:30",
        "answers": {"1": 1, "2": 0},
        "questionTimes": {"1": 30, "2": 45},
        "resultsData": [{"questionId": 1, "isCorrect": True}],
    }
    payload.update(extra)
    return payload


@pytest.fixture
def result_payload():
    return make_result
