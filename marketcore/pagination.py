"""Pagination parameters and offset arithmetic."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20


@dataclass(frozen=True)
class PaginationParams:
    """Page number (starting at 1) and page size requested by a client."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


@dataclass(frozen=True)
class PaginationInfo:
    """Pagination summary returned alongside a page of results."""

    total: int
    page: int
    limit: int
    pages: int


def calculate_offset(page: int, limit: int) -> int:
    """Return the index of the first item on a 1-based page."""
    if page < 1:
        raise ValueError(f"page must be at least 1, got {page}")
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    return (page - 1) * limit