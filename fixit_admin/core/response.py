"""Standardized JSON response envelope helpers."""


from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from fixit_admin.core.listing import ListResult
from fixit_admin.core.pagination import PageMeta
from fixit_admin.schemas.common import CamelModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Single-item response envelope: `{ data: {...} }`"""

    data: T

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class ListResponse(BaseModel, Generic[T]):
    """Paginated list response envelope: `{ data: [...], meta: {...}, tabs: {...} }`"""

    data: list[T]
    meta: PageMeta
    tabs: dict[str, int] = {}

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def paginated(items: list, meta: PageMeta, tabs: dict[str, int] | None = None) -> dict:
    """Build a paginated response dict for use with ListResponse."""
    return {"data": items, "meta": meta, "tabs": tabs or {}}


def listed(result: ListResult, model: type[CamelModel]) -> dict:
    """Validate the rows of *result* into *model* and wrap them for ListResponse.

    One malformed backend row fails the whole page with a 502.
    """
    return paginated(
        [model.from_backend(row) for row in result.items],
        result.meta,
        result.tabs,
    )
