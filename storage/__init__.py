"""Session storage."""

from storage.sessions import SessionStorage, get_storage

__all__ = ["SessionStorage", "get_storage"]
