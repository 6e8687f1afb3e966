"""View-facing queries over the merged catalog."""

from src.query.catalog import (
    DEFAULT_PAGE_SIZE,
    Page,
    bookmarked_scholarships,
    featured,
    filter_options,
    filter_scholarships,
    find_scholarship,
    paginate,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "Page",
    "bookmarked_scholarships",
    "featured",
    "filter_options",
    "filter_scholarships",
    "find_scholarship",
    "paginate",
]
