"""Validation utilities."""
from typing import Any, Iterable


def describe_validation_errors(
    errors: Iterable[dict[str, Any]], prefix: tuple[object, ...] = ()
) -> str:
    """Flatten pydantic errors to 'field: reason' pairs."""
    parts = []
    for error in errors:
        location = [str(item) for item in (*prefix, *error.get("loc", ())) if item != "body"]
        field = ".".join(location) or "body"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "Validation failed: " + "; ".join(parts)
