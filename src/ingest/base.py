from __future__ import annotations

from abc import ABC, abstractmethod

SCHOLARSHIPS_RESOURCE = "scholarships.json"
POSTS_RESOURCE = "posts.json"


class BaselineSource(ABC):
    name: str

    @abstractmethod
    def fetch_text(self, resource: str) -> str:
        """Return the raw text of a named baseline resource.

        Raises RetrievalFailure when the resource cannot be read.
        """
