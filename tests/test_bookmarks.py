from __future__ import annotations

from pathlib import Path

from src.ingest.sources.directory import DirectoryBaselineSource
from src.query.catalog import bookmarked_scholarships
from src.records.results import NotAuthenticated
from src.records.schema import Session
from src.repository.bookmarks import BookmarkIndex
from src.repository.records import RecordRepository
from src.store.keyed_store import USERS_KEY, KeyedStore


def _repository(tmp_path: Path) -> RecordRepository:
    return RecordRepository(store=KeyedStore(), baseline_source=DirectoryBaselineSource(root=tmp_path / "baseline"))


def test_toggle_without_session_is_rejected(tmp_path: Path) -> None:
    repository = _repository(tmp_path)

    result = repository.toggle_bookmark(None, "1")

    assert not result.success
    assert isinstance(result.error, NotAuthenticated)
    assert result.message == "You must be logged in to bookmark."


def test_toggle_twice_round_trips_membership(tmp_path: Path) -> None:
    repository = _repository(tmp_path)
    session = repository.register("a@x.com", "p").unwrap()

    first = repository.toggle_bookmark(session, "3")
    second = repository.toggle_bookmark(session, "3")

    assert (first.value, second.value) == (True, False)
    assert repository.bookmarks_for(session) == []


def test_bookmarks_keep_insertion_order_without_duplicates(tmp_path: Path) -> None:
    repository = _repository(tmp_path)
    session = repository.register("a@x.com", "p").unwrap()

    for scholarship_id in ("4", "1", "2", "1", "1"):
        repository.toggle_bookmark(session, scholarship_id)

    assert repository.bookmarks_for(session) == ["4", "2", "1"]
    stored = repository.store.read(USERS_KEY, [])[0]["bookmarks"]
    assert stored == ["4", "2", "1"]


def test_toggle_fails_closed_for_deleted_account(tmp_path: Path) -> None:
    repository = _repository(tmp_path)
    session = repository.register("a@x.com", "p").unwrap()
    repository.store.write(USERS_KEY, [])

    result = repository.toggle_bookmark(session, "1")

    assert isinstance(result.error, NotAuthenticated)
    assert repository.store.read(USERS_KEY, []) == []


def test_bookmarks_are_scoped_to_the_session_account(tmp_path: Path) -> None:
    repository = _repository(tmp_path)
    alice = repository.register("alice@x.com", "p").unwrap()
    bob = repository.register("bob@x.com", "p").unwrap()

    repository.toggle_bookmark(alice, "1")
    repository.toggle_bookmark(bob, "2")

    assert repository.bookmarks_for(alice) == ["1"]
    assert repository.bookmarks_for(bob) == ["2"]
    assert repository.bookmarks_for(None) == []


def test_bookmark_index_contains_and_toggle(tmp_path: Path) -> None:
    repository = _repository(tmp_path)
    session = repository.register("a@x.com", "p").unwrap()
    index = BookmarkIndex(repository, session)

    assert not index.contains("5")
    assert index.toggle("5").value is True
    assert index.contains("5")
    assert index.ids() == ["5"]

    anonymous = BookmarkIndex(repository, None)
    assert not anonymous.contains("5")
    assert isinstance(anonymous.toggle("5").error, NotAuthenticated)


def test_bookmarked_scholarships_follow_catalog_order(tmp_path: Path) -> None:
    repository = _repository(tmp_path)
    session = Session(email="a@x.com")
    repository.register("a@x.com", "p")
    for scholarship_id in ("5", "missing", "2"):
        repository.toggle_bookmark(session, scholarship_id)

    saved = bookmarked_scholarships(repository.merged_scholarships(), repository.bookmarks_for(session))

    assert [record.id for record in saved] == ["2", "5"]
