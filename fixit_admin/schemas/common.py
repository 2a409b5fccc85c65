"""Shared Pydantic schema bases with camelCase aliases."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from fixit_admin.core.exceptions import BackendUnavailableError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="CamelModel")


class CamelModel(BaseModel):
    """All API schemas inherit from this to auto-generate camelCase aliases."""

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }

    @classmethod
    def from_backend(cls: type[ModelT], data: Any) -> ModelT:
        """Validate a payload received from the upstream backend.

        A payload that does not fit the schema is the backend's fault, so it
        surfaces as a 502 rather than an unhandled validation error.
        """
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            logger.warning("Malformed %s from backend: %s", cls.__name__, exc)
            raise BackendUnavailableError(
                f"Backend returned a malformed {cls.__name__} record"
            ) from exc


class BackendRecord(CamelModel):
    """A record mirrored from the upstream JSON store.

    Fields the dashboard does not know about are kept and passed through
    unchanged, so detail views show whatever the backend stores.
    """

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
        "extra": "allow",
    }

    id: int | str


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by form endpoints."""
    message: str


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str
