"""Async client for the upstream REST backend (json-server style JSON store).

All upstream HTTP lives here. Services receive a :class:`BackendClient`
and never touch httpx directly. Failures are translated into
:mod:`fixit_admin.core.exceptions` types; there is no retry.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from typing import Any

import httpx

from fixit_admin.core.config import settings
from fixit_admin.core.exceptions import (
    BackendUnavailableError,
    NotFoundError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

# Human-readable singular names for error messages.
_LABELS = {
    "users": "User",
    "customers": "Customer",
    "vendors": "Vendor",
    "repairers": "Repairer",
    "repair-companies": "Repair company",
    "transactions": "Transaction",
    "content": "Content item",
    "notifications": "Notification",
    "onboarding": "Onboarding application",
    "orders": "Order",
    "stores": "Store",
    "products": "Product",
    "reports": "Report",
    "invoices": "Invoice",
    "e-repairBookings": "Booking",
    "booking-repairers": "Repairer",
    "e-repairRepairs": "Repair",
    "e-repairDiscovery": "Discovery",
    "e-repairReports": "Repair report",
    "sosRequests": "SOS request",
    "superAdmins": "Admin",
    "reviews": "Review",
    "adverts": "Advert",
    "news": "News item",
}


def _label(resource: str) -> str:
    return _LABELS.get(resource, resource)


class BackendClient:
    def __init__(
        self,
        base_url: str | None = None,
        *,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = token if token is not None else settings.backend_api_token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._http = httpx.AsyncClient(
            base_url=base_url or settings.backend_api_url,
            headers=headers,
            timeout=timeout if timeout is not None else settings.backend_timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "BackendClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        entity: str,
        entity_id: Any = None,
        **kwargs: Any,
    ) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Backend %s %s failed: %s", method, path, exc)
            raise BackendUnavailableError(f"Failed to load {entity}") from exc

        if response.status_code == 404:
            raise NotFoundError(entity, entity_id)
        if response.status_code == 401:
            raise UnauthorizedError("Backend rejected the request")
        if response.is_error:
            logger.warning(
                "Backend %s %s answered %s", method, path, response.status_code
            )
            raise BackendUnavailableError(f"Failed to load {entity}")

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise BackendUnavailableError(f"Backend returned invalid JSON for {entity}") from exc

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list(self, resource: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        data = await self._request("GET", f"/{resource}", entity=resource, params=params)
        if not isinstance(data, list):
            raise BackendUnavailableError(f"Backend returned a malformed {resource} collection")
        return data

    async def get(self, resource: str, entity_id: Any) -> dict[str, Any]:
        data = await self._request(
            "GET", f"/{resource}/{entity_id}", entity=_label(resource), entity_id=entity_id
        )
        if not isinstance(data, dict):
            raise BackendUnavailableError(f"Backend returned a malformed {resource} record")
        return data

    async def get_document(self, resource: str) -> Any:
        """Fetch a singleton resource such as ``/dashboardStats``."""
        return await self._request("GET", f"/{resource}", entity=resource)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, resource: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", f"/{resource}", entity=resource, json=body)

    async def update(self, resource: str, entity_id: Any, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request(
            "PUT", f"/{resource}/{entity_id}", entity=_label(resource), entity_id=entity_id, json=body
        )

    async def patch(self, resource: str, entity_id: Any, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request(
            "PATCH", f"/{resource}/{entity_id}", entity=_label(resource), entity_id=entity_id, json=body
        )

    async def delete(self, resource: str, entity_id: Any) -> None:
        await self._request(
            "DELETE", f"/{resource}/{entity_id}", entity=_label(resource), entity_id=entity_id
        )


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------
async def get_backend() -> AsyncGenerator[BackendClient, None]:
    """Yield a backend client scoped to one request."""
    async with BackendClient() as client:
        yield client
