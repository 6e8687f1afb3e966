from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_USER_AGENT = "ScholarLink/0.1 (+https://localhost; contact=local)"
logger = logging.getLogger(__name__)
_SLOW_FETCH_SECONDS = 5.0


@dataclass(slots=True)
class BaselineHttpClient:
    """Fetches baseline JSON documents as text.

    Retries default to zero, so a failed fetch falls straight back to the
    built-in catalog.
    """

    timeout_seconds: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    max_retries: int = 0
    _session: requests.Session = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._session = requests.Session()
        self._session.headers.update({"User-Agent": self.user_agent, "Accept": "application/json"})
        adapter = HTTPAdapter(
            max_retries=Retry(total=self.max_retries, allowed_methods=frozenset({"GET"}), raise_on_status=False)
        )
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)

    def close(self) -> None:
        self._session.close()

    def get_text(self, url: str) -> str:
        started_at = time.monotonic()
        response = self._session.get(url, timeout=self.timeout_seconds)
        elapsed = time.monotonic() - started_at
        if elapsed > _SLOW_FETCH_SECONDS:
            logger.warning("Baseline fetch took %.3fs: %s", elapsed, url)
        response.raise_for_status()
        return response.text
