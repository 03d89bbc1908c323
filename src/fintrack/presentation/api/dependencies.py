"""FastAPI dependency injection for the FinTrack API.

Provides dependencies for:
- Settings
- Database sessions (engine and session maker live on ``app.state``)
- Repository factory
- The bank connection used by imports
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.domain.banking.ports import BankConnectionPort
from fintrack.infrastructure.banking import SimulatedBankAdapter
from fintrack.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from fintrack_config import Settings, get_settings

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


AppSettings = Annotated[Settings, Depends(get_app_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the shared session maker.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Repository Factory & Bank Connection
# -----------------------------------------------------------------------------


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session=session)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


def get_bank_connection(settings: AppSettings) -> BankConnectionPort:
    """Bank source used for imports (the simulated one unless overridden)."""
    return SimulatedBankAdapter.from_settings(settings)


BankConnection = Annotated[BankConnectionPort, Depends(get_bank_connection)]
