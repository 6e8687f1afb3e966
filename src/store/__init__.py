"""String-keyed JSON storage used by the record repository."""

from src.store.backends import DirectoryBackend, MemoryBackend, StorageBackend
from src.store.keyed_store import (
    APPROVED_KEY,
    CONTACT_MESSAGES_KEY,
    CURRENT_USER_KEY,
    NEWSLETTER_KEY,
    SUBMISSIONS_KEY,
    USERS_KEY,
    KeyedStore,
)

__all__ = [
    "APPROVED_KEY",
    "CONTACT_MESSAGES_KEY",
    "CURRENT_USER_KEY",
    "DirectoryBackend",
    "KeyedStore",
    "MemoryBackend",
    "NEWSLETTER_KEY",
    "StorageBackend",
    "SUBMISSIONS_KEY",
    "USERS_KEY",
]
