"""Authentication: registration, login, password-reset requests and sessions.

Users live in the upstream ``/users`` collection and passwords are compared
as stored there. Login sessions are owned by this service and kept in the
local database.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from fixit_admin.core.config import settings
from fixit_admin.core.exceptions import ConflictError, UnauthorizedError
from fixit_admin.domain.session import AuthSession
from fixit_admin.repositories.session import SessionRepository
from fixit_admin.schemas.auth import (
    AuthUser,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from fixit_admin.services.backend_client import BackendClient

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
RESET_ACKNOWLEDGEMENT = (
    "If an account exists for that email, password reset instructions have been sent."
)


def utc_now_iso() -> str:
    """Current time in the backend's timestamp format (``...Z``)."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _next_user_id(users: list[dict[str, Any]]) -> int:
    ids = [u["id"] for u in users if isinstance(u.get("id"), int)]
    return max(ids, default=0) + 1


class SessionService:
    """Local login sessions: open, resolve from a bearer token, close."""

    def __init__(self, session: AsyncSession):
        self._repo = SessionRepository(session)

    async def open(
        self,
        user: AuthUser,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> tuple[AuthSession, datetime]:
        expires_at = datetime.now(timezone.utc) + timedelta(minutes=settings.session_ttl_minutes)
        auth = await self._repo.create(
            token=secrets.token_urlsafe(32),
            user_id=str(user.id),
            user_name=user.name,
            email=user.email,
            role=user.role,
            ip_address=ip_address,
            user_agent=user_agent,
            expires_at=expires_at,
        )
        return auth, expires_at

    async def resolve(self, token: str | None) -> AuthSession:
        if not token:
            raise UnauthorizedError()
        auth = await self._repo.get_active_by_token(token)
        if auth is None:
            raise UnauthorizedError("Session expired or invalid")
        await self._repo.touch(auth.id)
        return auth

    async def close(self, auth: AuthSession) -> None:
        await self._repo.soft_delete(auth.id)

    async def close_all_for_user(self, user_id: str) -> int:
        return await self._repo.revoke_all_for_user(user_id)


class AuthService:
    def __init__(self, backend: BackendClient, session: AsyncSession):
        self._backend = backend
        self._sessions = SessionService(session)

    async def _find_user(self, email: str) -> tuple[dict[str, Any] | None, list[dict[str, Any]]]:
        users = await self._backend.list("users")
        wanted = email.lower()
        for user in users:
            if str(user.get("email", "")).lower() == wanted:
                return user, users
        return None, users

    async def register(self, data: RegisterRequest) -> AuthUser:
        existing, users = await self._find_user(data.email)
        if existing is not None:
            raise ConflictError("User with this email already exists")

        new_user = {
            "id": _next_user_id(users),
            "name": data.name,
            "email": data.email,
            "password": data.password,
            "role": "admin",
            "createdAt": utc_now_iso(),
            "lastLogin": None,
            "isActive": True,
        }
        await self._backend.create("users", new_user)
        logger.info("Registered user %s", new_user["id"])
        return AuthUser.model_validate(new_user)

    async def login(
        self,
        data: LoginRequest,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> LoginResponse:
        user, _ = await self._find_user(data.email)
        if user is None or user.get("password") != data.password:
            logger.info("Failed login for %s", data.email)
            raise UnauthorizedError(INVALID_CREDENTIALS)
        if user.get("isActive") is False:
            raise UnauthorizedError("Account is disabled")

        await self._backend.patch("users", user["id"], {"lastLogin": utc_now_iso()})

        auth_user = AuthUser(
            id=user["id"],
            name=user.get("name") or "",
            email=user.get("email") or data.email,
            role=user.get("role") or "admin",
        )
        auth, expires_at = await self._sessions.open(
            auth_user, ip_address=ip_address, user_agent=user_agent
        )
        logger.info("User %s logged in", auth_user.id)
        return LoginResponse(user=auth_user, token=auth.token, expires_at=expires_at)

    async def forgot_password(self, data: ForgotPasswordRequest) -> str:
        user, _ = await self._find_user(data.email)
        # Same answer either way so the form cannot be used to enumerate accounts.
        if user is None:
            logger.info("Password reset requested for unknown email")
        else:
            logger.info("Password reset requested for user %s", user.get("id"))
        return RESET_ACKNOWLEDGEMENT
