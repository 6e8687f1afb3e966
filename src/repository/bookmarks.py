from __future__ import annotations

from dataclasses import dataclass

from src.records.results import Result
from src.records.schema import Session
from src.repository.records import RecordRepository


@dataclass(frozen=True, slots=True)
class BookmarkIndex:
    """Bookmarks of the account named by `session`; anonymous sessions see none."""

    repository: RecordRepository
    session: Session | None

    def ids(self) -> list[str]:
        return self.repository.bookmarks_for(self.session)

    def contains(self, scholarship_id: str) -> bool:
        return scholarship_id in self.ids()

    def toggle(self, scholarship_id: str) -> Result[bool]:
        return self.repository.toggle_bookmark(self.session, scholarship_id)
