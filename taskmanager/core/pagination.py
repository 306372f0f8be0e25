"""Pagination — pure clamping of page/size inputs for task listing.

Invariants:
    - Result page >= 0
    - Result size in [1, MAX_PAGE_SIZE]
    - Result offset (page * size) fits a signed 64-bit SQL integer
    - Out-of-range input is clamped silently, never rejected

Design Decisions:
    - size <= 0 falls back to the default (20), not to 1: a missing/zero size
      means "use the default", matching what clients send when unset
"""

from dataclasses import dataclass

from taskmanager.core.domain_types import (
    DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE,
)

MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size


def clamp_page_request(page: int | None, size: int | None) -> PageRequest:
    """Normalize raw page/size into a valid PageRequest."""
    effective_page = DEFAULT_PAGE if page is None else max(page, DEFAULT_PAGE)
    if size is None or size <= 0:
        effective_size = DEFAULT_PAGE_SIZE
    elif size > MAX_PAGE_SIZE:
        effective_size = MAX_PAGE_SIZE
    else:
        effective_size = size
    effective_page = min(effective_page, MAX_OFFSET // effective_size)
    return PageRequest(page=effective_page, size=effective_size)
