from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import pandas as pd

from src.records.schema import SCHOLARSHIP_FIELDS, Scholarship

FILTER_COLUMNS = ("country", "level", "field", "sponsor")
DEFAULT_PAGE_SIZE = 5
FEATURED_COUNT = 3


@dataclass(frozen=True, slots=True)
class Page:
    items: list[Scholarship]
    page: int
    total_pages: int
    total_items: int
    page_size: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def catalog_frame(records: Sequence[Scholarship]) -> pd.DataFrame:
    return pd.DataFrame([record.to_dict() for record in records], columns=list(SCHOLARSHIP_FIELDS))


def filter_scholarships(
    records: Sequence[Scholarship],
    *,
    keyword: str | None = None,
    country: str | None = None,
    level: str | None = None,
    field: str | None = None,
    sponsor: str | None = None,
) -> list[Scholarship]:
    """Keyword matches title or description ignoring case; the rest match exactly."""
    if not records:
        return []

    df = catalog_frame(records)
    mask = pd.Series(True, index=df.index)

    needle = (keyword or "").strip().lower()
    if needle:
        in_title = df["title"].str.lower().str.contains(needle, regex=False)
        in_description = df["description"].str.lower().str.contains(needle, regex=False)
        mask &= in_title | in_description

    for column, value in zip(FILTER_COLUMNS, (country, level, field, sponsor), strict=True):
        if value:
            mask &= df[column].eq(value)

    return [records[position] for position in df.index[mask.to_numpy()]]


def filter_options(records: Sequence[Scholarship]) -> dict[str, list[str]]:
    if not records:
        return {column: [] for column in FILTER_COLUMNS}
    df = catalog_frame(records)
    return {
        column: [value for value in df[column].drop_duplicates().tolist() if value]
        for column in FILTER_COLUMNS
    }


def paginate(
    records: Sequence[Scholarship],
    page_size: int = DEFAULT_PAGE_SIZE,
    page_number: int = 1,
) -> Page:
    if page_size <= 0:
        raise ValueError("page_size must be positive.")

    total_items = len(records)
    total_pages = math.ceil(total_items / page_size)
    page = max(1, min(page_number, max(total_pages, 1)))
    start = (page - 1) * page_size
    return Page(
        items=list(records[start : start + page_size]),
        page=page,
        total_pages=total_pages,
        total_items=total_items,
        page_size=page_size,
    )


def find_scholarship(records: Iterable[Scholarship], scholarship_id: str) -> Scholarship | None:
    return next((record for record in records if record.id == scholarship_id), None)


def featured(records: Sequence[Scholarship], count: int = FEATURED_COUNT) -> list[Scholarship]:
    return list(records[:count])


def bookmarked_scholarships(
    records: Iterable[Scholarship], bookmark_ids: Iterable[str]
) -> list[Scholarship]:
    """Catalog order, limited to bookmarked ids that still exist."""
    wanted = set(bookmark_ids)
    return [record for record in records if record.id in wanted]
