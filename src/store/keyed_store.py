from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from src.records.results import CorruptPersistedData
from src.store.backends import MemoryBackend, StorageBackend

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "currentUser"
USERS_KEY = "users"
APPROVED_KEY = "approvedScholarships"
SUBMISSIONS_KEY = "submissions"
NEWSLETTER_KEY = "newsletter"
CONTACT_MESSAGES_KEY = "contactMessages"


@dataclass(slots=True)
class KeyedStore:
    """JSON values over a text backend.

    Missing keys and text that fails to parse both read back as the caller's
    default. Every write replaces the whole value stored under the key.
    """

    backend: StorageBackend = field(default_factory=MemoryBackend)

    def read(self, key: str, default: Any = None) -> Any:
        try:
            text = _read_text(self.backend, key)
            if text is None or text == "":
                return copy.deepcopy(default)
            return _decode(key, text)
        except CorruptPersistedData as exc:
            logger.warning("%s Using default for %r.", exc, key)
            return copy.deepcopy(default)

    def write(self, key: str, value: Any) -> None:
        self.backend.set_text(key, json.dumps(value, ensure_ascii=False))

    def remove(self, key: str) -> None:
        self.backend.delete(key)

    def contains(self, key: str) -> bool:
        try:
            return _read_text(self.backend, key) is not None
        except CorruptPersistedData:
            return True

    def update(self, key: str, default: Any, mutate: Callable[[Any], Any]) -> Any:
        """Re-read `key`, apply `mutate`, and write the result back.

        `mutate` may change the value in place and return None, or return a
        replacement value. A list default also replaces stored values of any
        other type.
        """
        current = self.read_list(key) if isinstance(default, list) else self.read(key, default)
        replaced = mutate(current)
        updated = current if replaced is None else replaced
        self.write(key, updated)
        return updated

    def read_list(self, key: str) -> list[Any]:
        value = self.read(key, [])
        if not isinstance(value, list):
            logger.warning("Expected a list under %r, found %s; using [].", key, type(value).__name__)
            return []
        return value


def _decode(key: str, text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CorruptPersistedData(f"Stored value for {key!r} is not valid JSON ({exc.msg}).") from exc


def _read_text(backend: StorageBackend, key: str) -> str | None:
    try:
        return backend.get_text(key)
    except UnicodeDecodeError as exc:
        raise CorruptPersistedData(f"Stored value for {key!r} is not valid UTF-8 ({exc.reason}).") from exc
