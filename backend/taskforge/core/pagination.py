"""Pagination Helper — 1-based page/limit to offset/limit.

Invariants:
    - skip = (page - 1) * limit
    - Defaults page=1, limit=10
    - No bounds checking: zero/negative values pass through as computed.
      Callers at the HTTP boundary constrain page/limit with Query(ge=1).
"""

from typing import TypeVar

from sqlalchemy import Select

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

SelectT = TypeVar("SelectT", bound=Select)


def page_window(page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> tuple[int, int]:
    """Return (skip, limit) for a 1-based page."""
    return (page - 1) * limit, limit


def paginate(
    query: SelectT, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT,
) -> SelectT:
    """Apply offset/limit for the given page to a Select."""
    skip, limit = page_window(page, limit)
    return query.offset(skip).limit(limit)
