"""Bank sources router."""

from fastapi import APIRouter

from fintrack.domain.banking.value_objects import SUPPORTED_BANK_SOURCES
from fintrack.presentation.api.schemas import BankSourceResponse

router = APIRouter()


@router.get("", summary="List supported bank sources")
async def list_banks() -> list[BankSourceResponse]:
    return [
        BankSourceResponse(id=source.id, name=source.name, logo=source.logo)
        for source in SUPPORTED_BANK_SOURCES
    ]
