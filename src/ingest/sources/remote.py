from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urljoin

import requests

from src.ingest.base import BaselineSource
from src.ingest.http import BaselineHttpClient
from src.records.results import RetrievalFailure


@dataclass(slots=True)
class HttpBaselineSource(BaselineSource):
    base_url: str
    client: BaselineHttpClient = field(default_factory=BaselineHttpClient)
    name: str = "http"

    def resource_url(self, resource: str) -> str:
        base = self.base_url if self.base_url.endswith("/") else f"{self.base_url}/"
        return urljoin(base, resource)

    def fetch_text(self, resource: str) -> str:
        url = self.resource_url(resource)
        try:
            return self.client.get_text(url)
        except requests.RequestException as exc:
            raise RetrievalFailure(f"Failed to load {url}: {exc}") from exc
