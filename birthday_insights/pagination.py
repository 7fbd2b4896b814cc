"""Fixed-size pages over result lists."""

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def paginate(items: Sequence[T], page: int = 1, page_size: int = 10) -> Page[T]:
    """Return the 1-based *page* of *items*.

    A page past the end is returned empty rather than raising.

    Raises:
        ValueError: If *page* or *page_size* is less than 1.
    """
    if page < 1:
        raise ValueError("page must be at least 1.")
    if page_size < 1:
        raise ValueError("page_size must be at least 1.")

    start = (page - 1) * page_size
    return Page(
        items=list(items[start : start + page_size]),
        page=page,
        page_size=page_size,
        total_items=len(items),
        total_pages=math.ceil(len(items) / page_size),
    )
