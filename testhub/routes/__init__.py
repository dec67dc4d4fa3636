"""API route modules."""
from testhub.routes import results, system, tests

__all__ = ["results", "system", "tests"]
