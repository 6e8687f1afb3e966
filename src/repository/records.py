from __future__ import annotations

import logging
import secrets
import string
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from src.ingest.base import BaselineSource
from src.ingest.loader import load_baseline_posts, load_baseline_scholarships
from src.ingest.registry import resolve_baseline_source
from src.records.results import (
    AlreadySubscribed,
    DuplicateAccount,
    InvalidCredentials,
    NotAuthenticated,
    Result,
)
from src.records.schema import Account, BlogPost, ContactMessage, Scholarship, Session
from src.repository.credentials import CredentialVerifier, HashedCredentialVerifier
from src.repository.session import SessionContext
from src.store.keyed_store import (
    APPROVED_KEY,
    CONTACT_MESSAGES_KEY,
    NEWSLETTER_KEY,
    SUBMISSIONS_KEY,
    USERS_KEY,
    KeyedStore,
)

logger = logging.getLogger(__name__)

SUBMISSION_ID_PREFIX = "sub"
_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_submission_id(prefix: str = SUBMISSION_ID_PREFIX) -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{prefix}-{suffix}"


def _record_id(item: Any) -> str | None:
    if not isinstance(item, dict) or item.get("id") is None:
        return None
    return str(item["id"])


def _scholarships_from(items: list[Any], *, key: str) -> list[Scholarship]:
    records: list[Scholarship] = []
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning("Skipping non-object entry %d under %r.", position, key)
            continue
        try:
            records.append(Scholarship.from_mapping(item))
        except ValueError:
            logger.warning("Skipping entry %d under %r without an id.", position, key)
    return records


@dataclass(slots=True)
class RecordRepository:
    """Typed access to every persisted collection plus the seed catalog.

    Each mutation re-reads its collection immediately before writing it back.
    """

    store: KeyedStore = field(default_factory=KeyedStore)
    baseline_source: BaselineSource = field(default_factory=resolve_baseline_source)
    verifier: CredentialVerifier = field(default_factory=HashedCredentialVerifier)
    sessions: SessionContext = field(init=False)
    _baseline: list[Scholarship] | None = field(init=False, default=None, repr=False)
    _posts: list[BlogPost] | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        self.sessions = SessionContext(self.store)

    # Seed catalog

    def load_baseline(self) -> list[Scholarship]:
        if self._baseline is None:
            self._baseline = load_baseline_scholarships(self.baseline_source)
        return list(self._baseline)

    def refresh_baseline(self) -> None:
        self._baseline = None
        self._posts = None

    def load_posts(self) -> list[BlogPost]:
        if self._posts is None:
            self._posts = load_baseline_posts(self.baseline_source)
        return list(self._posts)

    def find_post(self, post_id: str) -> BlogPost | None:
        return next((post for post in self.load_posts() if post.id == post_id), None)

    def merged_scholarships(self) -> list[Scholarship]:
        merged: dict[str, Scholarship] = {}
        for record in [*self.load_baseline(), *self.list_approved()]:
            merged[record.id] = record
        return list(merged.values())

    # Approved scholarships and submissions

    def list_approved(self) -> list[Scholarship]:
        return _scholarships_from(self.store.read_list(APPROVED_KEY), key=APPROVED_KEY)

    def remove_approved_scholarship(self, scholarship_id: str) -> bool:
        """Delete an approved record. Seed ids are not in this collection, so they stay."""
        approved = self.store.read_list(APPROVED_KEY)
        kept = [item for item in approved if _record_id(item) != scholarship_id]
        if len(kept) == len(approved):
            return False
        self.store.write(APPROVED_KEY, kept)
        logger.info("Removed approved scholarship %s.", scholarship_id)
        return True

    def list_submissions(self) -> list[Scholarship]:
        return _scholarships_from(self.store.read_list(SUBMISSIONS_KEY), key=SUBMISSIONS_KEY)

    def add_submission(self, item: Scholarship | Mapping[str, Any]) -> Scholarship:
        """Queue a submission. An id that is missing or already pending gets a fresh one."""
        payload = item.to_dict() if isinstance(item, Scholarship) else dict(item)
        pending_ids = {_record_id(entry) for entry in self.store.read_list(SUBMISSIONS_KEY)}
        if not payload.get("id") or str(payload["id"]) in pending_ids:
            if payload.get("id"):
                logger.info("Submission id %s is already pending; assigning a new id.", payload["id"])
            payload["id"] = generate_submission_id()
        record = Scholarship.from_mapping(payload)

        self.store.update(SUBMISSIONS_KEY, [], lambda items: items.append(record.to_dict()))
        logger.info("Queued submission %s (%s).", record.id, record.title)
        return record

    def submit_scholarship(
        self, session: Session | None, item: Scholarship | Mapping[str, Any]
    ) -> Result[Scholarship]:
        if self.account_for(session) is None:
            return Result.fail(NotAuthenticated("You must be logged in to submit scholarships."))
        return Result.ok(self.add_submission(item))

    def remove_submission(self, submission_id: str) -> bool:
        submissions = self.store.read_list(SUBMISSIONS_KEY)
        kept = [item for item in submissions if _record_id(item) != submission_id]
        if len(kept) == len(submissions):
            return False
        self.store.write(SUBMISSIONS_KEY, kept)
        return True

    def promote_submission(self, submission_id: str) -> bool:
        """Move a submission, unchanged, into the approved collection.

        Every pending entry carrying the id moves, so none stays behind.
        """
        submissions = self.store.read_list(SUBMISSIONS_KEY)
        promoted = [item for item in submissions if _record_id(item) == submission_id]
        if not promoted:
            return False
        remaining = [item for item in submissions if _record_id(item) != submission_id]

        self.store.update(APPROVED_KEY, [], lambda items: items.extend(promoted))
        self.store.write(SUBMISSIONS_KEY, remaining)
        logger.info("Promoted submission %s to the catalog.", submission_id)
        return True

    # Accounts and sessions

    def list_accounts(self) -> list[Account]:
        return [
            Account.from_mapping(item)
            for item in self.store.read_list(USERS_KEY)
            if isinstance(item, dict)
        ]

    def get_account(self, email: str) -> Account | None:
        return next((account for account in self.list_accounts() if account.email == email), None)

    def account_for(self, session: Session | None) -> Account | None:
        """The account behind `session`, or None when anonymous or stale."""
        if session is None:
            return None
        return self.get_account(session.email)

    def register(self, email: str, password: str) -> Result[Session]:
        if self.get_account(email) is not None:
            return Result.fail(DuplicateAccount())

        account = Account(email=email, password=self.verifier.hash(password))
        self.store.update(USERS_KEY, [], lambda items: items.append(account.to_dict()))
        logger.info("Registered account %s.", email)
        return Result.ok(self.sessions.establish(email, is_admin=False))

    def login(self, email: str, password: str) -> Result[Session]:
        account = self.get_account(email)
        if account is None or not self.verifier.verify(password, account.password):
            return Result.fail(InvalidCredentials())
        return Result.ok(self.sessions.establish(account.email, is_admin=account.is_admin))

    def logout(self) -> None:
        self.sessions.clear()

    def set_admin(self, email: str, is_admin: bool = True) -> bool:
        """Grant or revoke the admin flag. Returns False for an unknown email."""
        found = False

        def _apply(items: list[Any]) -> None:
            nonlocal found
            for item in items:
                if isinstance(item, dict) and item.get("email") == email:
                    item["isAdmin"] = bool(is_admin)
                    found = True

        self.store.update(USERS_KEY, [], _apply)
        if found:
            logger.info("Set admin=%s for %s.", bool(is_admin), email)
            self.sessions.refresh(self.list_accounts())
        return found

    # Bookmarks

    def bookmarks_for(self, session: Session | None) -> list[str]:
        account = self.account_for(session)
        return list(account.bookmarks) if account is not None else []

    def toggle_bookmark(self, session: Session | None, scholarship_id: str) -> Result[bool]:
        if session is None:
            return Result.fail(NotAuthenticated("You must be logged in to bookmark."))

        state: dict[str, bool] = {}

        def _flip(items: list[Any]) -> None:
            for item in items:
                if not isinstance(item, dict) or item.get("email") != session.email:
                    continue
                bookmarks = Account.from_mapping(item).bookmarks
                if scholarship_id in bookmarks:
                    bookmarks.remove(scholarship_id)
                    state["bookmarked"] = False
                else:
                    bookmarks.append(scholarship_id)
                    state["bookmarked"] = True
                item["bookmarks"] = bookmarks
                return

        self.store.update(USERS_KEY, [], _flip)
        if "bookmarked" not in state:
            return Result.fail(NotAuthenticated("Your session no longer matches an account."))
        return Result.ok(state["bookmarked"])

    # Newsletter and contact messages

    def list_newsletter(self) -> list[str]:
        return [str(email) for email in self.store.read_list(NEWSLETTER_KEY)]

    def subscribe_newsletter(self, email: str) -> Result[str]:
        if email in self.list_newsletter():
            return Result.fail(AlreadySubscribed())
        self.store.update(NEWSLETTER_KEY, [], lambda items: items.append(email))
        return Result.ok(email)

    def submit_contact_message(
        self, name: str, email: str, message: str, *, now: datetime | None = None
    ) -> ContactMessage:
        contact = ContactMessage.create(name, email, message, now=now)
        self.store.update(CONTACT_MESSAGES_KEY, [], lambda items: items.append(contact.to_dict()))
        return contact

    def list_contact_messages(self) -> list[ContactMessage]:
        return [
            ContactMessage.from_mapping(item)
            for item in self.store.read_list(CONTACT_MESSAGES_KEY)
            if isinstance(item, dict)
        ]
