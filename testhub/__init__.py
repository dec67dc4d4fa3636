"""Test-taking backend: test definitions, attempt results and statistics."""

__version__ = "1.0.0"
