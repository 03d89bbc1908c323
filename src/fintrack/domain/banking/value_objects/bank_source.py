"""Bank sources a user can connect to."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BankSource:
    """An institution transactions can be imported from."""

    id: str
    name: str
    logo: str = ""


SUPPORTED_BANK_SOURCES: tuple[BankSource, ...] = (
    BankSource(id="chase", name="Chase Bank", logo="🏦"),
    BankSource(id="bofa", name="Bank of America", logo="🏛️"),
    BankSource(id="wellsfargo", name="Wells Fargo", logo="🐴"),
    BankSource(id="citi", name="Citibank", logo="🏢"),
    BankSource(id="pnc", name="PNC Bank", logo="🏪"),
    BankSource(id="usbank", name="U.S. Bank", logo="🇺🇸"),
)


def find_bank_source(
    source_id: str,
    sources: tuple[BankSource, ...] = SUPPORTED_BANK_SOURCES,
) -> Optional[BankSource]:
    normalized = (source_id or "").strip().lower()
    for source in sources:
        if source.id == normalized:
            return source
    return None
