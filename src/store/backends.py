from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from uuid import uuid4

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_STORE_DIR = ROOT_DIR / "data" / "store"

_KEY_SAFE_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


def resolve_store_dir(store_dir: Path | None = None) -> Path:
    if store_dir is None:
        return DEFAULT_STORE_DIR
    return store_dir if store_dir.is_absolute() else ROOT_DIR / store_dir


class StorageBackend(ABC):
    """Raw text storage addressed by key."""

    @abstractmethod
    def get_text(self, key: str) -> str | None:
        """Return the stored text, or None when the key is absent."""

    @abstractmethod
    def set_text(self, key: str, text: str) -> None:
        """Replace the text stored under key."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key; missing keys are ignored."""

    @abstractmethod
    def keys(self) -> list[str]:
        """Return the stored keys in sorted order."""


@dataclass(slots=True)
class MemoryBackend(StorageBackend):
    entries: dict[str, str] = field(default_factory=dict)

    def get_text(self, key: str) -> str | None:
        return self.entries.get(key)

    def set_text(self, key: str, text: str) -> None:
        self.entries[key] = text

    def delete(self, key: str) -> None:
        self.entries.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self.entries)


@dataclass(slots=True)
class DirectoryBackend(StorageBackend):
    """One `<key>.json` file per key under `root`."""

    root: Path = field(default_factory=resolve_store_dir)

    def _path_for(self, key: str) -> Path:
        if not _KEY_SAFE_PATTERN.match(key):
            raise ValueError(f"Store key '{key}' contains unsupported characters.")
        return self.root / f"{key}.json"

    def get_text(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_text(self, key: str, text: str) -> None:
        output_path = self._path_for(key)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = output_path.parent / f"{output_path.name}.{uuid4().hex}.tmp"
        try:
            temp_path.write_text(text, encoding="utf-8")
            temp_path.replace(output_path)
        finally:
            if temp_path.exists():
                temp_path.unlink()

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        if path.exists():
            path.unlink()

    def keys(self) -> list[str]:
        if not self.root.exists():
            return []
        return sorted(path.stem for path in self.root.glob("*.json"))
