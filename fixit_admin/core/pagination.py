"""Pagination helpers for list endpoints."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from fastapi import Query
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from fixit_admin.core.config import PAGE_SIZE_OPTIONS, settings
from fixit_admin.core.exceptions import ValidationError

T = TypeVar("T")

__all__ = ["PAGE_SIZE_OPTIONS", "PageMeta", "PaginationParams", "paginate"]


class PaginationParams:
    """FastAPI dependency for `?page=1&limit=10`."""

    def __init__(
        self,
        page: int = Query(default=1, ge=1, description="Page number (1-based)"),
        limit: int = Query(
            default=settings.default_page_size,
            description=f"Items per page, one of {', '.join(map(str, PAGE_SIZE_OPTIONS))}",
        ),
    ):
        if limit not in PAGE_SIZE_OPTIONS:
            raise ValidationError(
                f"limit must be one of {list(PAGE_SIZE_OPTIONS)}",
                fields={"limit": "Unsupported page size"},
            )
        self.page = page
        self.limit = limit

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    pages: int
    start_item: int
    end_item: int
    has_prev: bool
    has_next: bool

    model_config = {"populate_by_name": True, "alias_generator": to_camel}

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> "PageMeta":
        pages = math.ceil(total / limit) if limit else 0
        end_item = min(page * limit, total)
        start_item = (page - 1) * limit + 1
        if start_item > end_item:
            start_item = 0
            end_item = 0
        return cls(
            total=total,
            page=page,
            limit=limit,
            pages=pages,
            start_item=start_item,
            end_item=end_item,
            has_prev=page > 1,
            has_next=page < pages,
        )


def paginate(items: Sequence[T], page: int, limit: int) -> tuple[list[T], PageMeta]:
    """Slice *items* for the 1-based *page* and describe the slice.

    A page past the end yields an empty list; it is not an error.
    """
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")
    start = (page - 1) * limit
    return list(items[start:start + limit]), PageMeta.build(len(items), page, limit)
