from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from ..core.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """A validated (page, limit) pair; page is 1-based."""

    page: int
    limit: int

    def __post_init__(self) -> None:
        if isinstance(self.page, bool) or not isinstance(self.page, int) or self.page < 1:
            raise ValidationError("page must be an integer >= 1")
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise ValidationError("limit must be an integer > 0")

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page window plus the filtered count before pagination."""

    data: Sequence[T]
    total_count: int
    page: int = 1
    limit: int = 0

    @classmethod
    def empty(cls, request: PageRequest) -> "Page[T]":
        return cls(data=[], total_count=0, page=request.page, limit=request.limit)
