from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from src.records.schema import Account, Session
from src.store.keyed_store import CURRENT_USER_KEY, KeyedStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SessionContext:
    """The single active session, persisted under `currentUser`.

    Nothing is cached: `current()` re-reads the store so a session written by
    another process is picked up on the next call.
    """

    store: KeyedStore

    def current(self) -> Session | None:
        payload = self.store.read(CURRENT_USER_KEY, None)
        if payload is None:
            return None
        session = Session.from_mapping(payload)
        if session is None:
            logger.warning("Ignoring malformed session snapshot.")
        return session

    @property
    def is_authenticated(self) -> bool:
        return self.current() is not None

    def establish(self, email: str, is_admin: bool = False) -> Session:
        session = Session(email=email, is_admin=bool(is_admin))
        self.store.write(CURRENT_USER_KEY, session.to_dict())
        return session

    def clear(self) -> None:
        self.store.remove(CURRENT_USER_KEY)

    def refresh(self, accounts: Iterable[Account]) -> Session | None:
        """Re-derive the snapshot from the account it names.

        Clears the session when that account no longer exists.
        """
        session = self.current()
        if session is None:
            return None
        account = next((item for item in accounts if item.email == session.email), None)
        if account is None:
            logger.info("Session for %s names a missing account; clearing it.", session.email)
            self.clear()
            return None
        if account.is_admin != session.is_admin:
            return self.establish(account.email, account.is_admin)
        return session
