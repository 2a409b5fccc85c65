"""FixIt Admin — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fixit_admin.core.config import settings
from fixit_admin.core.exceptions import register_exception_handlers
from fixit_admin.core.security import current_session
from fixit_admin.db.base import create_tables
from fixit_admin.middleware.audit import AuditMiddleware
from fixit_admin.schemas.common import HealthResponse

# Public routes (login, registration, password reset)
from fixit_admin.routers.v1.auth import router as auth_router

# Routes behind a login session
from fixit_admin.routers.v1.account_usage import router as account_usage_router
from fixit_admin.routers.v1.adverts import router as adverts_router
from fixit_admin.routers.v1.content import router as content_router
from fixit_admin.routers.v1.dashboard import router as dashboard_router
from fixit_admin.routers.v1.directory import (
    customers_router,
    repair_companies_router,
    repairers_router,
    vendors_router,
)
from fixit_admin.routers.v1.ecommerce import router as ecommerce_router
from fixit_admin.routers.v1.erepair import router as erepair_router
from fixit_admin.routers.v1.invoices import router as invoices_router
from fixit_admin.routers.v1.news import router as news_router
from fixit_admin.routers.v1.notifications import router as notifications_router
from fixit_admin.routers.v1.onboarding import router as onboarding_router
from fixit_admin.routers.v1.profile import router as profile_router
from fixit_admin.routers.v1.reviews import router as reviews_router
from fixit_admin.routers.v1.sos import router as sos_router
from fixit_admin.routers.v1.super_admins import router as super_admins_router
from fixit_admin.routers.v1.transactions import router as transactions_router

logger = logging.getLogger(__name__)

_PROTECTED_ROUTERS = (
    dashboard_router,
    customers_router,
    vendors_router,
    repairers_router,
    repair_companies_router,
    transactions_router,
    invoices_router,
    ecommerce_router,
    erepair_router,
    sos_router,
    content_router,
    onboarding_router,
    notifications_router,
    reviews_router,
    adverts_router,
    news_router,
    super_admins_router,
    profile_router,
    account_usage_router,
)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    if settings.auto_create_tables:
        await create_tables()
    logger.info("%s started (backend: %s)", settings.app_name, settings.backend_api_url)
    yield


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        lifespan=_lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Audit middleware ---
    app.add_middleware(AuditMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(auth_router, prefix="/api/v1")
    for router in _PROTECTED_ROUTERS:
        app.include_router(router, prefix="/api/v1", dependencies=[Depends(current_session)])

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
