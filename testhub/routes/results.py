"""Attempt result endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session as DbSession

from testhub.database import get_db
from testhub.models import ResultCreate
from testhub.serialization import serialize_result
from testhub.services import result_service

router = APIRouter(prefix="/api/results", tags=["results"])


@router.post("")
def save_result(
    payload: ResultCreate,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Record a completed attempt."""
    result = result_service.create_result(db, payload)
    return {
        "success": True,
        "result": serialize_result(result),
        "message": "Result saved successfully",
    }


# Registered before /{attempt_id} so "history" is not taken for an attempt id
@router.get("/history")
def get_history(db: Annotated[DbSession, Depends(get_db)]) -> dict[str, object]:
    """Per-test attempt summary for the dashboard."""
    history = result_service.load_history(db)
    return {
        "success": True,
        "history": {test_id: entry.model_dump() for test_id, entry in history.items()},
    }


@router.get("/test/{test_id}")
def list_results_for_test(
    test_id: str,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """List results of a test with best/last/average statistics."""
    results = result_service.list_results_for_test(db, test_id)
    stats = result_service.compute_stats(results)
    return {
        "success": True,
        "results": [serialize_result(result) for result in results],
        "stats": stats.model_dump(),
    }


@router.get("/{attempt_id}")
def get_result(
    attempt_id: str,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Get a single attempt result."""
    result = result_service.get_result(db, attempt_id)
    return {"success": True, "result": serialize_result(result)}
