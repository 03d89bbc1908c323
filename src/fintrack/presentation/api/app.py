"""FastAPI application factory.

Creates and configures the FastAPI application with all routers and
exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, FastAPI

from fintrack import __version__
from fintrack.infrastructure.persistence.sqlalchemy.database import (
    build_engine,
    build_session_maker,
    create_tables,
)
from fintrack.presentation.api.exception_handlers import setup_exception_handlers
from fintrack.presentation.api.routers import (
    banks_router,
    categories_router,
    health_router,
    imports_router,
    transactions_router,
)
from fintrack.presentation.logging_config import configure_logging
from fintrack_config import Settings, get_settings

logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Categories",
        "description": """Spending categories and the rule-based classifier.

**Classification:**
- Ordered keyword rules, first match wins
- Keywords match the description or the merchant, case-insensitively
- Unmatched income falls back to `Income`, everything else to `Other`
""",
    },
    {
        "name": "Banks",
        "description": "Bank sources transactions can be imported from.",
    },
    {
        "name": "Imports",
        "description": """Connect to a bank source and import its transactions.

**Failure modes:**
- `401` - the bank refused the login; fix the input and retry
- `503` - fetching or storing failed; records stored before the failure
  are kept, retry the whole import
""",
    },
    {
        "name": "Transactions",
        "description": "Manual and imported transactions, plus category totals.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(
        categories_router,
        prefix="/categories",
        tags=["Categories"],
    )
    v1_router.include_router(banks_router, prefix="/banks", tags=["Banks"])
    v1_router.include_router(imports_router, prefix="/imports", tags=["Imports"])
    v1_router.include_router(
        transactions_router,
        prefix="/transactions",
        tags=["Transactions"],
    )
    v1_router.include_router(health_router, prefix="/health", tags=["Health"])
    return v1_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the engine and schema on startup, dispose it on shutdown."""
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, __version__)

    engine = build_engine(settings.database_url, echo=settings.debug)
    app.state.engine = engine
    app.state.session_maker = build_session_maker(engine)
    await create_tables(engine)

    yield

    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application.

    Parameters
    ----------
    settings
        Settings to use; defaults to the cached environment settings

    Returns
    -------
    Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Personal finance tracking with **rule-based categorization** "
            "and **bank transaction import**."
        ),
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/", tags=["Health"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": __version__,
            "api_base": API_V1_PREFIX,
        }

    return app
