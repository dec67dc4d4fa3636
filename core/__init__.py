"""Shared helpers used by the launchers and the API package."""
