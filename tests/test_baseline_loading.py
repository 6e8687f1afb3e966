from __future__ import annotations

import json
from pathlib import Path

import requests
from requests.adapters import BaseAdapter

from src.ingest.base import BaselineSource
from src.ingest.http import BaselineHttpClient
from src.ingest.loader import load_baseline_posts, load_baseline_scholarships
from src.ingest.registry import resolve_baseline_source
from src.ingest.sources.directory import DirectoryBaselineSource
from src.ingest.sources.remote import HttpBaselineSource
from src.records.fallback import FALLBACK_POSTS, FALLBACK_SCHOLARSHIPS


def _write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


def test_directory_source_loads_scholarships_and_posts(tmp_path: Path) -> None:
    _write_json(
        tmp_path / "scholarships.json",
        [
            {"id": "10", "title": "Ocean Research Grant", "country": "Norway", "tags": ["marine"]},
            {"id": 11, "title": "Numeric Id Award"},
        ],
    )
    _write_json(tmp_path / "posts.json", [{"id": "p1", "title": "Essay tips", "author": "Team"}])
    source = DirectoryBaselineSource(root=tmp_path)

    scholarships = load_baseline_scholarships(source)
    posts = load_baseline_posts(source)

    assert [record.id for record in scholarships] == ["10", "11"]
    assert scholarships[0].tags == ("marine",)
    assert [post.title for post in posts] == ["Essay tips"]


def test_missing_files_fall_back_to_builtin_records(tmp_path: Path) -> None:
    source = DirectoryBaselineSource(root=tmp_path / "absent")

    scholarships = load_baseline_scholarships(source)
    posts = load_baseline_posts(source)

    assert scholarships == list(FALLBACK_SCHOLARSHIPS)
    assert [record.id for record in scholarships] == ["1", "2", "3", "4", "5"]
    assert posts == list(FALLBACK_POSTS)
    assert len(posts) == 2


def test_malformed_content_falls_back(tmp_path: Path) -> None:
    (tmp_path / "scholarships.json").write_text("{broken", encoding="utf-8")
    _write_json(tmp_path / "posts.json", {"id": "not-a-list"})
    source = DirectoryBaselineSource(root=tmp_path)

    assert load_baseline_scholarships(source) == list(FALLBACK_SCHOLARSHIPS)
    assert load_baseline_posts(source) == list(FALLBACK_POSTS)


def test_empty_array_is_an_empty_catalog(tmp_path: Path) -> None:
    _write_json(tmp_path / "scholarships.json", [])
    _write_json(tmp_path / "posts.json", [])
    source = DirectoryBaselineSource(root=tmp_path)

    assert load_baseline_scholarships(source) == []
    assert load_baseline_posts(source) == []


def test_array_without_usable_entries_falls_back(tmp_path: Path) -> None:
    _write_json(tmp_path / "scholarships.json", [{"title": "No id"}, "text"])
    source = DirectoryBaselineSource(root=tmp_path)

    assert load_baseline_scholarships(source) == list(FALLBACK_SCHOLARSHIPS)


def test_entries_without_ids_are_skipped(tmp_path: Path) -> None:
    _write_json(tmp_path / "scholarships.json", [{"title": "No id"}, "text", {"id": "7", "title": "Kept"}])
    source = DirectoryBaselineSource(root=tmp_path)

    assert [record.title for record in load_baseline_scholarships(source)] == ["Kept"]


def test_http_source_failure_falls_back() -> None:
    class _UnreachableClient:
        def get_text(self, url):  # noqa: ANN001
            raise requests.ConnectionError(f"unreachable: {url}")

    source = HttpBaselineSource(base_url="https://example.org/data", client=_UnreachableClient())

    assert load_baseline_scholarships(source) == list(FALLBACK_SCHOLARSHIPS)


def test_http_source_builds_resource_urls() -> None:
    requested: list[str] = []

    class _RecordingClient:
        def get_text(self, url):  # noqa: ANN001
            requested.append(url)
            return json.dumps([{"id": "42", "title": "Remote Award"}])

    source = HttpBaselineSource(base_url="https://example.org/data", client=_RecordingClient())

    records = load_baseline_scholarships(source)

    assert requested == ["https://example.org/data/scholarships.json"]
    assert [record.title for record in records] == ["Remote Award"]


def test_resolve_baseline_source_picks_source_by_location(tmp_path: Path) -> None:
    remote = resolve_baseline_source("https://example.org/static/")
    local = resolve_baseline_source(tmp_path)

    assert isinstance(remote, HttpBaselineSource)
    assert isinstance(local, DirectoryBaselineSource)
    assert local.root == tmp_path
    assert isinstance(remote, BaselineSource)


class _StaticAdapter(BaseAdapter):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__()
        self.status_code = status_code
        self.body = body
        self.sent: list[requests.PreparedRequest] = []

    def send(self, request, **kwargs):  # noqa: ANN001, ANN003
        self.sent.append(request)
        response = requests.Response()
        response.status_code = self.status_code
        response._content = self.body.encode("utf-8")
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self) -> None:
        pass


def test_http_client_returns_body_text_with_user_agent() -> None:
    client = BaselineHttpClient(user_agent="ScholarLink-test")
    adapter = _StaticAdapter(200, json.dumps([{"id": "42", "title": "Remote Award"}]))
    client._session.mount("https://", adapter)

    source = HttpBaselineSource(base_url="https://example.org/data", client=client)

    assert [record.title for record in load_baseline_scholarships(source)] == ["Remote Award"]
    assert adapter.sent[0].headers["User-Agent"] == "ScholarLink-test"


def test_http_client_error_status_falls_back() -> None:
    client = BaselineHttpClient()
    client._session.mount("https://", _StaticAdapter(404, "missing"))

    source = HttpBaselineSource(base_url="https://example.org/data", client=client)

    assert load_baseline_posts(source) == list(FALLBACK_POSTS)
