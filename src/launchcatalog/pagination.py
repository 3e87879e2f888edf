"""Page/limit → skip/limit conversion for catalog listings."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 0  # 0 returns the whole catalog


@dataclass(frozen=True)
class Pagination:
    skip: int
    limit: int


def get_pagination(page: int | None = None, limit: int | None = None) -> Pagination:
    """Convert 1-based page numbers into a skip offset.

    Negative values are taken by absolute value; missing or zero values fall
    back to the defaults. Page 2 with limit 50 skips the first 50 records.
    """
    page = abs(page or 0) or DEFAULT_PAGE
    limit = abs(limit or 0) or DEFAULT_LIMIT
    return Pagination(skip=(page - 1) * limit, limit=limit)
