from __future__ import annotations

import hmac
import logging
from typing import Protocol

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

DEFAULT_SCHEMES = ("pbkdf2_sha256",)


class CredentialVerifier(Protocol):
    def hash(self, password: str) -> str:
        """Return the value stored in the account's `password` field."""

    def verify(self, password: str, stored: str) -> bool:
        """Return True when `password` matches the stored value."""


class HashedCredentialVerifier:
    """Salted hashes through a passlib CryptContext."""

    def __init__(self, schemes: tuple[str, ...] = DEFAULT_SCHEMES) -> None:
        self._context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, stored: str) -> bool:
        if not stored:
            return False
        try:
            if self._context.identify(stored) is None:
                return False
            return self._context.verify(password, stored)
        except ValueError as exc:
            logger.warning("Rejecting malformed stored credential: %s", exc)
            return False


class PlainTextVerifier:
    """Stores passwords as given and compares them exactly.

    Only for stores written by the legacy site, which kept plain passwords.
    """

    def hash(self, password: str) -> str:
        return password

    def verify(self, password: str, stored: str) -> bool:
        return hmac.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))
