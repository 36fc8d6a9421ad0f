"""Users API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UsersApiError → JSON responses with a "message"
    - CORS configured from settings (not hardcoded)
    - The app owns exactly one UserRegistry, on app.state.registry

Design Decisions:
    - Registry built at import, not in lifespan: ASGI test transports skip lifespan
    - Swagger UI served at settings.docs_url (/api-docs by default)
    - Three error handler layers: UsersApiError (domain), RequestValidationError
      (Pydantic), Exception (catch-all) — never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.error_handlers import register_error_handlers
from users_api.api.rate_limit import apply_rate_limiting
from users_api.api.routes import diagnostics, health, users
from users_api.config import get_settings
from users_api.core.user_registry import UserRegistry
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Users API started with {len(app.state.registry)} seed users "
        f"(docs at {settings.docs_url})",
    )
    yield
    logger.info("Users API shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.app_title,
    version=settings.app_version,
    description="API",
    docs_url=settings.docs_url,
    openapi_tags=[{"name": "Users", "description": "Users API"}],
    servers=[{"url": url} for url in settings.openapi_servers],
    lifespan=lifespan,
)
app.state.registry = UserRegistry.seeded()

# CORS: origins from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

apply_rate_limiting(app)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(users.router)
app.include_router(diagnostics.router)

register_error_handlers(app)
