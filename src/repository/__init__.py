from __future__ import annotations

from .admin import AdminConsole
from .bookmarks import BookmarkIndex
from .credentials import CredentialVerifier, HashedCredentialVerifier, PlainTextVerifier
from .records import RecordRepository, generate_submission_id
from .session import SessionContext

__all__ = [
    "AdminConsole",
    "BookmarkIndex",
    "CredentialVerifier",
    "HashedCredentialVerifier",
    "PlainTextVerifier",
    "RecordRepository",
    "SessionContext",
    "generate_submission_id",
]
