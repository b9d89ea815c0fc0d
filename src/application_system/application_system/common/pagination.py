from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class PageableQuery(Protocol[T_co]):
    def count(self) -> int:
        raise NotImplementedError

    def fetch(self, *, offset: int = 0, limit: Optional[int] = None) -> Sequence[T_co]:
        raise NotImplementedError


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    page_number: int = 1
    page_size: int = 0
    total_records: int = 0

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return int(math.ceil(self.total_records / self.page_size))


def paginate(query: PageableQuery[T], page: int, size: int) -> Page[T]:
    """Offset pagination over an already ordered query."""
    if page <= 0 or size <= 0:
        raise ValueError("page and size must be positive")

    total = query.count()
    items = list(query.fetch(offset=(page - 1) * size, limit=size))
    return Page(items=items, page_number=page, page_size=size, total_records=total)
