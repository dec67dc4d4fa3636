"""Client-side access to the API."""
from testhub.client.storage_service import StorageService

__all__ = ["StorageService"]
