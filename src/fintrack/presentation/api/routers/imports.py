"""Bank import router."""

import logging

from fastapi import APIRouter, status

from fintrack.application.commands.integration import BankImportCommand
from fintrack.domain.integration.exceptions import TransactionImportError
from fintrack.presentation.api.dependencies import (
    AppSettings,
    BankConnection,
    RepoFactory,
)
from fintrack.presentation.api.schemas import (
    ImportRequest,
    ImportSummaryResponse,
    TransactionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    summary="Connect to a bank and import its transactions",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "All records imported"},
        400: {"description": "Unknown bank or missing credentials"},
        401: {"description": "Bank refused the login; retry with new input"},
        503: {"description": "Import failed; some records may be stored"},
    },
)
async def create_import(
    request: ImportRequest,
    factory: RepoFactory,
    bank: BankConnection,
    settings: AppSettings,
) -> ImportSummaryResponse:
    """
    Run the full connect-and-import workflow.

    Records stored before a failure are kept (no rollback), so a failed
    import still commits what it wrote.
    """
    command = BankImportCommand.from_factory(
        factory,
        bank_connection=bank,
        settings=settings,
    )

    try:
        summary = await command.execute(
            source_id=request.source_id,
            username=request.username,
            password=request.password,
            account_number=request.account_number,
        )
        await factory.session.commit()
    except TransactionImportError:
        await factory.session.commit()
        raise
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Imported %d transaction(s) from %s", summary.count, summary.source_id)
    return ImportSummaryResponse(
        source_id=summary.source_id,
        imported_at=summary.imported_at,
        count=summary.count,
        categories=[category.label for category in summary.categories],
        transactions=[
            TransactionResponse.from_domain(tx) for tx in summary.transactions
        ],
    )
