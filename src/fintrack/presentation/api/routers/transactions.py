"""Transactions router for transaction management endpoints."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Query, status

from fintrack.application.commands.transactions import (
    CreateTransactionCommand,
    DeleteTransactionCommand,
)
from fintrack.application.queries.analytics import SpendingBreakdownQuery
from fintrack.application.queries.transactions import ListTransactionsQuery
from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.transactions.value_objects import TransactionType
from fintrack.presentation.api.dependencies import RepoFactory
from fintrack.presentation.api.schemas import (
    SpendingBreakdownResponse,
    TransactionCreateRequest,
    TransactionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ImportedFilter = Annotated[
    Optional[bool],
    Query(description="Only imported (true) or only manual (false)"),
]
CategoryFilter = Annotated[
    Optional[str],
    Query(description="Category label, e.g. 'Groceries'"),
]
TypeFilter = Annotated[
    Optional[TransactionType],
    Query(description="'income' or 'expense'"),
]
LimitFilter = Annotated[
    Optional[int],
    Query(ge=1, le=1000, description="Max transactions"),
]


@router.get("", summary="List transactions")
async def list_transactions(
    factory: RepoFactory,
    imported: ImportedFilter = None,
    category: CategoryFilter = None,
    type: TypeFilter = None,  # noqa: A002
    limit: LimitFilter = None,
) -> list[TransactionResponse]:
    """List transactions, newest date first."""
    query = ListTransactionsQuery.from_factory(factory)
    transactions = await query.execute(
        imported=imported,
        category=Category.from_label(category) if category else None,
        transaction_type=type,
        limit=limit,
    )
    return [TransactionResponse.from_domain(tx) for tx in transactions]


@router.get("/breakdown", summary="Spending by category")
async def spending_breakdown(
    factory: RepoFactory,
    imported_only: bool = False,
) -> SpendingBreakdownResponse:
    query = SpendingBreakdownQuery.from_factory(factory)
    result = await query.execute(imported_only=imported_only)
    return SpendingBreakdownResponse.from_result(result)


@router.post(
    "",
    summary="Create a manual transaction",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Transaction created"},
        400: {"description": "Validation failed"},
    },
)
async def create_transaction(
    request: TransactionCreateRequest,
    factory: RepoFactory,
) -> TransactionResponse:
    command = CreateTransactionCommand.from_factory(factory)

    try:
        stored = await command.execute(
            amount=request.amount,
            description=request.description,
            date=request.date,
            category=request.category,
            transaction_type=request.type,
            merchant=request.merchant,
            account_type=request.account_type,
            recurring=request.recurring,
            auto_categorize=request.auto_categorize,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Transaction created: %s", stored.id)
    return TransactionResponse.from_domain(stored)


@router.delete(
    "/{transaction_id}",
    summary="Delete a transaction",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        204: {"description": "Transaction deleted"},
        404: {"description": "Transaction not found"},
    },
)
async def delete_transaction(
    transaction_id: int,
    factory: RepoFactory,
) -> None:
    command = DeleteTransactionCommand.from_factory(factory)

    try:
        await command.execute(transaction_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Transaction deleted: %s", transaction_id)
