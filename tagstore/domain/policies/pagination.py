# tagstore/domain/policies/pagination.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class PaginationMeta:
    """
    Page description returned next to a page of records.

    ``from_`` and ``to`` are 1-based positions in the whole filtered result.
    An empty page is the range ``to == from_ - 1``.
    """
    current_page: int
    per_page: int
    from_: int
    to: int
    total_pages: int
    total_docs: int

    def as_dict(self) -> dict[str, int]:
        return {
            "current_page": self.current_page,
            "per_page": self.per_page,
            "from": self.from_,
            "to": self.to,
            "total_pages": self.total_pages,
            "total_docs": self.total_docs,
        }


def compute_pagination(page: int, limit: int, total_count: int, returned_count: int) -> PaginationMeta:
    """
    Build pagination metadata for ``page`` (1-based) of size ``limit``.

    A page past the end is not an error: it has ``returned_count == 0``,
    ``from_`` beyond ``total_count`` and ``to == from_ - 1``, while
    ``total_pages``/``total_docs`` still describe the whole collection.
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if limit < 1:
        raise ValueError("limit must be >= 1")
    if total_count < 0 or returned_count < 0:
        raise ValueError("counts must be >= 0")

    total_pages = 0 if total_count == 0 else -(-total_count // limit)
    start = (page - 1) * limit + 1
    end = start - 1 if returned_count == 0 else start + returned_count - 1

    return PaginationMeta(
        current_page=page,
        per_page=limit,
        from_=start,
        to=end,
        total_pages=total_pages,
        total_docs=total_count,
    )


def normalize_page_args(
    page: Optional[int],
    limit: Optional[int],
    *,
    default_limit: int,
    max_limit: int,
) -> Tuple[int, int]:
    """
    Listing is always satisfiable: missing or non-positive values fall back
    to page 1 / ``default_limit``, and ``limit`` is capped at ``max_limit``.
    """
    p = page if page is not None and page >= 1 else 1
    n = limit if limit is not None and limit >= 1 else default_limit
    return p, min(n, max_limit)


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit
