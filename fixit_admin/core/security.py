"""Bearer-token session dependency shared by all authenticated routes."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from fixit_admin.db.base import get_db
from fixit_admin.domain.session import AuthSession
from fixit_admin.services.auth import SessionService

bearer_scheme = HTTPBearer(auto_error=False)


async def current_session(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_db),
) -> AuthSession:
    """Resolve `Authorization: Bearer <token>` to a live session or raise 401."""
    token = credentials.credentials if credentials else None
    auth = await SessionService(session).resolve(token)
    # Read back by the audit middleware.
    request.state.user_id = auth.user_id
    return auth
