"""Audit logging middleware — records every state-changing request to audit_trail."""


import logging
import time

from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from fixit_admin.db.base import session_scope
from fixit_admin.domain.audit import AuditTrail

logger = logging.getLogger(__name__)

# Methods that mutate state
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

# Leading path segments that carry no entity information
_PREFIX_SEGMENTS = {"api", "v1"}

# Sections whose second segment names the collection
_GROUP_SEGMENTS = {"e-repair", "e-commerce"}


def infer_entity(path: str) -> tuple[str, str | None]:
    """Map a request path to ``(entity_type, entity_id)``.

    ``/api/v1/customers/12`` -> ``("customers", "12")``;
    ``/api/v1/content/3/review`` -> ``("content", "3")``;
    ``/api/v1/e-repair/bookings/7/assign`` -> ``("e-repair/bookings", "7")``.
    """
    parts = [p for p in path.strip("/").split("/") if p]
    while parts and parts[0] in _PREFIX_SEGMENTS:
        parts.pop(0)
    if not parts:
        return "unknown", None
    if parts[0] in _GROUP_SEGMENTS and len(parts) >= 2:
        parts = [f"{parts[0]}/{parts[1]}", *parts[2:]]
    return parts[0], parts[1] if len(parts) >= 2 else None


class AuditMiddleware:
    """Logs all write operations.

    The audit row is written after the endpoint has finished, including its
    database commit, so the two never hold SQLite write locks at once.
    Failures in audit logging are caught and logged; they never raise to
    the caller.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] not in _WRITE_METHODS:
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        # Created up front so the endpoint and this middleware share it.
        request.state.user_id = None
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        start = time.monotonic()
        await self.app(scope, receive, send_wrapper)
        duration_ms = round((time.monotonic() - start) * 1000)

        await self._record(request, status_code, duration_ms)

    async def _record(
        self, request: Request, status_code: int, duration_ms: int
    ) -> None:
        """Persist an audit row. Swallows all errors to avoid cascading failures."""
        try:
            entity_type, entity_id = infer_entity(request.url.path)
            async with session_scope() as session:
                session.add(
                    AuditTrail(
                        user_id=getattr(request.state, "user_id", None),
                        ip_address=request.client.host if request.client else None,
                        user_agent=request.headers.get("user-agent"),
                        action=f"{request.method}:{status_code}",
                        entity_type=entity_type,
                        entity_id=entity_id,
                        description=f"{request.method} {request.url.path} -> {status_code} ({duration_ms}ms)",
                    )
                )
        except Exception:  # pragma: no cover
            logger.exception("Failed to record audit row for %s %s", request.method, request.url.path)
