"""Record types, fallback catalog, and the error taxonomy."""

from src.records.fallback import FALLBACK_POSTS, FALLBACK_SCHOLARSHIPS, fallback_posts, fallback_scholarships
from src.records.results import (
    AlreadySubscribed,
    CorruptPersistedData,
    DuplicateAccount,
    InvalidCredentials,
    NotAuthenticated,
    NotAuthorized,
    Result,
    RetrievalFailure,
    ScholarLinkError,
)
from src.records.schema import Account, BlogPost, ContactMessage, Scholarship, Session

__all__ = [
    "Account",
    "AlreadySubscribed",
    "BlogPost",
    "ContactMessage",
    "CorruptPersistedData",
    "DuplicateAccount",
    "FALLBACK_POSTS",
    "FALLBACK_SCHOLARSHIPS",
    "InvalidCredentials",
    "NotAuthenticated",
    "NotAuthorized",
    "Result",
    "RetrievalFailure",
    "ScholarLinkError",
    "Scholarship",
    "Session",
    "fallback_posts",
    "fallback_scholarships",
]
