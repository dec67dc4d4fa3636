"""Test management endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session as DbSession

from testhub.database import get_db
from testhub.models import TestCreate, TestUpdate
from testhub.serialization import serialize_test
from testhub.services import test_service

router = APIRouter(prefix="/api/tests", tags=["tests"])


@router.get("")
def list_tests(db: Annotated[DbSession, Depends(get_db)]) -> dict[str, object]:
    """List all tests, newest first."""
    tests = test_service.list_tests(db)
    return {"success": True, "tests": [serialize_test(test) for test in tests]}


@router.get("/{test_id}")
def get_test(
    test_id: str,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Get a single test with its questions."""
    test = test_service.get_test(db, test_id)
    return {"success": True, "test": serialize_test(test)}


@router.post("")
def create_test(
    payload: TestCreate,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Create a new test."""
    test = test_service.create_test(db, payload)
    return {
        "success": True,
        "test": serialize_test(test),
        "message": "Test created successfully",
    }


@router.put("/{test_id}")
def update_test(
    test_id: str,
    payload: TestUpdate,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Update test fields."""
    test = test_service.update_test(db, test_id, payload)
    return {
        "success": True,
        "test": serialize_test(test),
        "message": "Test updated successfully",
    }


@router.delete("/{test_id}")
def delete_test(
    test_id: str,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Delete test together with its results."""
    test_service.delete_test(db, test_id)
    return {"success": True, "message": "Test deleted successfully"}
