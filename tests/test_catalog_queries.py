from __future__ import annotations

import pytest

from src.query.catalog import featured, filter_options, filter_scholarships, find_scholarship, paginate
from src.records.fallback import fallback_scholarships


def test_keyword_matches_title_or_description_ignoring_case() -> None:
    records = fallback_scholarships()

    by_title = filter_scholarships(records, keyword="STEM")
    by_description = filter_scholarships(records, keyword="governance")

    assert [record.id for record in by_title] == ["3"]
    assert [record.id for record in by_description] == ["2"]


def test_exact_filters_combine_with_keyword() -> None:
    records = fallback_scholarships()

    masters = filter_scholarships(records, level="Master's")
    masters_in_germany = filter_scholarships(records, level="Master's", country="Germany")
    nothing = filter_scholarships(records, keyword="oxford", country="Germany")

    assert [record.id for record in masters] == ["1", "5"]
    assert [record.id for record in masters_in_germany] == ["5"]
    assert nothing == []


def test_empty_filters_return_everything_in_order() -> None:
    records = fallback_scholarships()

    assert filter_scholarships(records, keyword="  ", country="", sponsor=None) == records
    assert filter_scholarships([], keyword="any") == []


def test_field_and_sponsor_filters_are_exact() -> None:
    records = fallback_scholarships()

    assert [r.id for r in filter_scholarships(records, field="Engineering")] == ["3"]
    assert filter_scholarships(records, sponsor="university of toronto") == []


def test_filter_options_are_unique_in_first_seen_order() -> None:
    options = filter_options(fallback_scholarships())

    assert options["level"] == ["Master's", "PhD", "Undergraduate"]
    assert options["country"][0] == "United Kingdom"
    assert len(options["sponsor"]) == 5
    assert filter_options([]) == {"country": [], "level": [], "field": [], "sponsor": []}


def test_paginate_slices_and_clamps_page_number() -> None:
    records = fallback_scholarships() * 2

    first = paginate(records, page_size=4, page_number=1)
    last = paginate(records, page_size=4, page_number=99)
    before_first = paginate(records, page_size=4, page_number=0)

    assert first.total_pages == 3
    assert [record.id for record in first.items] == ["1", "2", "3", "4"]
    assert first.has_next and not first.has_previous
    assert last.page == 3
    assert [record.id for record in last.items] == ["4", "5"]
    assert before_first.page == 1


def test_paginate_empty_list_and_invalid_size() -> None:
    page = paginate([], page_size=5, page_number=3)

    assert page.items == []
    assert page.page == 1
    assert page.total_pages == 0
    with pytest.raises(ValueError):
        paginate([], page_size=0)


def test_find_and_featured() -> None:
    records = fallback_scholarships()

    assert find_scholarship(records, "4").title == "ASEAN Undergraduate Scholarship"
    assert find_scholarship(records, "404") is None
    assert [record.id for record in featured(records)] == ["1", "2", "3"]
