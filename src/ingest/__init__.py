from __future__ import annotations

from .base import POSTS_RESOURCE, SCHOLARSHIPS_RESOURCE, BaselineSource
from .http import BaselineHttpClient
from .loader import load_baseline_posts, load_baseline_scholarships
from .registry import resolve_baseline_source

__all__ = [
    "BaselineHttpClient",
    "BaselineSource",
    "POSTS_RESOURCE",
    "SCHOLARSHIPS_RESOURCE",
    "load_baseline_posts",
    "load_baseline_scholarships",
    "resolve_baseline_source",
]
