"""Page/limit helpers shared by the list endpoints."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence, TypeVar

from fastapi import Query

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


@dataclass(slots=True)
class PaginationParams:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def parse(cls, page: Any = None, limit: Any = None) -> "PaginationParams":
        """Clamp raw query values; anything unparsable falls back to the default."""
        return cls(
            page=max(1, _to_int(page) or DEFAULT_PAGE),
            limit=min(MAX_LIMIT, max(1, _to_int(limit) or DEFAULT_LIMIT)),
        )

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)


def _to_int(value: Any) -> int:
    if value is None:
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def get_pagination(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> PaginationParams:
    return PaginationParams.parse(page, limit)


def paginate(items: Sequence[T], params: PaginationParams) -> list[T]:
    start = (params.page - 1) * params.limit
    return list(items[start : start + params.limit])


__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "PaginationParams",
    "get_pagination",
    "paginate",
]
