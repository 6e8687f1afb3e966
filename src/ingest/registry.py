from __future__ import annotations

from pathlib import Path

from .base import BaselineSource
from .sources.directory import DirectoryBaselineSource, resolve_baseline_dir
from .sources.remote import HttpBaselineSource


def resolve_baseline_source(location: str | Path | None = None) -> BaselineSource:
    """Pick a source for a base URL or a directory path."""
    if isinstance(location, str) and location.startswith(("http://", "https://")):
        return HttpBaselineSource(base_url=location)
    root = Path(location) if location is not None else None
    return DirectoryBaselineSource(root=resolve_baseline_dir(root))
