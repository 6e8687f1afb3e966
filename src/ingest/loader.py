from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping, TypeVar

from src.ingest.base import POSTS_RESOURCE, SCHOLARSHIPS_RESOURCE, BaselineSource
from src.records.fallback import fallback_posts, fallback_scholarships
from src.records.results import RetrievalFailure
from src.records.schema import BlogPost, Scholarship

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def parse_record_list(
    raw_text: str,
    build: Callable[[Mapping[str, Any]], RecordT],
    *,
    resource: str,
) -> list[RecordT]:
    """Decode a JSON array of objects, skipping entries that cannot be built.

    An empty array is a valid, empty result. A non-empty array in which no
    entry can be built raises RetrievalFailure.
    """
    try:
        loaded = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise RetrievalFailure(f"{resource} is not valid JSON ({exc.msg}).") from exc
    if not isinstance(loaded, list):
        raise RetrievalFailure(f"{resource} must contain a JSON array, found {type(loaded).__name__}.")

    records: list[RecordT] = []
    for position, item in enumerate(loaded):
        if not isinstance(item, dict):
            logger.warning("Skipping non-object entry %d in %s.", position, resource)
            continue
        try:
            records.append(build(item))
        except ValueError:
            logger.warning("Skipping invalid entry %d in %s.", position, resource, exc_info=True)
    if loaded and not records:
        raise RetrievalFailure(f"{resource} has no usable records among {len(loaded)} entries.")
    return records


def _load_or_fallback(
    source: BaselineSource,
    resource: str,
    build: Callable[[Mapping[str, Any]], RecordT],
    fallback: Callable[[], list[RecordT]],
) -> list[RecordT]:
    try:
        raw_text = source.fetch_text(resource)
        records = parse_record_list(raw_text, build, resource=resource)
    except RetrievalFailure as exc:
        logger.warning("Using fallback %s data: %s", resource, exc)
        return fallback()
    logger.info("Loaded %d records from %s via %s.", len(records), resource, source.name)
    return records


def load_baseline_scholarships(source: BaselineSource) -> list[Scholarship]:
    return _load_or_fallback(source, SCHOLARSHIPS_RESOURCE, Scholarship.from_mapping, fallback_scholarships)


def load_baseline_posts(source: BaselineSource) -> list[BlogPost]:
    return _load_or_fallback(source, POSTS_RESOURCE, BlogPost.from_mapping, fallback_posts)
