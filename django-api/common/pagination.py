"""Offset pagination primitives shared by the artist search and event listing."""

import math
from dataclasses import dataclass
from typing import Any, Generic, Self, TypeVar

from common.config import BookingConfig

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """1-indexed page number and page size."""

    page: int = 1
    limit: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be a positive integer")
        if self.limit < 1:
            raise ValueError("Limit must be a positive integer")

    @classmethod
    def build(cls, page: int | None, limit: int | None, config: BookingConfig) -> Self:
        """Apply the configured default and clamp the size into [1, max_page_size]."""
        size = config.default_page_size if limit is None else limit
        size = min(max(size, 1), config.max_page_size)
        return cls(page=page or 1, limit=size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total row count of the unpaginated query."""

    items: tuple[T, ...]
    page: int
    limit: int
    total: int

    @classmethod
    def from_request(cls, items: list[T], total: int, request: PageRequest) -> "Page[T]":
        return cls(items=tuple(items), page=request.page, limit=request.limit, total=total)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page * self.limit < self.total

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def pagination(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }
