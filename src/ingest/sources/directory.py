from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from src.ingest.base import BaselineSource
from src.records.results import RetrievalFailure

ROOT_DIR = Path(__file__).resolve().parents[3]
DEFAULT_BASELINE_DIR = ROOT_DIR / "data" / "baseline"


def resolve_baseline_dir(baseline_dir: Path | None = None) -> Path:
    if baseline_dir is None:
        return DEFAULT_BASELINE_DIR
    return baseline_dir if baseline_dir.is_absolute() else ROOT_DIR / baseline_dir


@dataclass(slots=True)
class DirectoryBaselineSource(BaselineSource):
    root: Path = field(default_factory=resolve_baseline_dir)
    name: str = "directory"

    def fetch_text(self, resource: str) -> str:
        path = self.root / resource
        try:
            return path.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise RetrievalFailure(f"Failed to load {resource} from {self.root}: {exc}") from exc
