"""Seeding and health endpoints."""
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session as DbSession

from testhub.database import get_db, is_connected
from testhub.services import test_service

router = APIRouter(prefix="/api", tags=["system"])


@router.post("/init-data")
def init_data(
    db: Annotated[DbSession, Depends(get_db)],
    payload: Annotated[dict[str, Any] | None, Body()] = None,
) -> dict[str, object]:
    """Seed the test collection once, while it is still empty.

    Records are validated only when they are about to be inserted.
    """
    tests = (payload or {}).get("tests") or []
    count, inserted = test_service.seed_tests(db, tests)
    if inserted:
        message = f"Initialized database with {count} tests"
    elif count > 0:
        message = f"Database already contains {count} tests"
    else:
        message = "No sample data provided"
    return {"success": True, "message": message}


@router.get("/health")
def health() -> dict[str, object]:
    """Liveness plus store connectivity."""
    return {
        "success": True,
        "message": "Server is running",
        "database": "connected" if is_connected() else "disconnected",
    }
