from fintrack.presentation.api.routers.banks import router as banks_router
from fintrack.presentation.api.routers.categories import router as categories_router
from fintrack.presentation.api.routers.health import router as health_router
from fintrack.presentation.api.routers.imports import router as imports_router
from fintrack.presentation.api.routers.transactions import (
    router as transactions_router,
)

__all__ = [
    "banks_router",
    "categories_router",
    "health_router",
    "imports_router",
    "transactions_router",
]
