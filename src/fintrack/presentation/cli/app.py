"""FinTrack CLI application using Typer.

Offers the classifier and the simulated bank import from a terminal,
plus a ``serve`` command that starts the HTTP API.
"""

import asyncio
import random
from decimal import Decimal, InvalidOperation
from typing import Optional

import typer
import uvicorn
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.table import Table

from fintrack.application.commands.integration import BankImportCommand
from fintrack.application.dtos.integration import ImportSummary
from fintrack.domain.banking.value_objects import (
    SUPPORTED_BANK_SOURCES,
    RawImportRecord,
)
from fintrack.domain.categorization.services import TransactionClassifier, infer_type
from fintrack.domain.categorization.value_objects import Category
from fintrack.domain.integration.exceptions import TransactionImportError
from fintrack.domain.shared.exceptions import DomainException
from fintrack.domain.shared.time import today_utc
from fintrack.domain.transactions.value_objects import TransactionType
from fintrack.infrastructure.banking import SimulatedBankAdapter
from fintrack.infrastructure.persistence.in_memory import InMemoryRepositoryFactory
from fintrack.presentation.logging_config import configure_logging
from fintrack_config import get_settings

app = typer.Typer(
    name="fintrack",
    help="FinTrack - transaction categorization and bank import",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show log output"),
) -> None:
    if verbose:
        configure_logging()


@app.command("banks")
def list_banks() -> None:
    """List the bank sources transactions can be imported from."""
    table = Table(title="Supported banks")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("", justify="center")
    for source in SUPPORTED_BANK_SOURCES:
        table.add_row(source.id, source.name, source.logo)
    console.print(table)


@app.command("categories")
def list_categories() -> None:
    """List spending categories and how they are displayed."""
    table = Table(title="Categories")
    table.add_column("Label", style="bold")
    table.add_column("Icon")
    table.add_column("Color", style="dim")
    for category in Category:
        table.add_row(
            category.label,
            category.presentation.icon,
            category.presentation.color,
        )
    console.print(table)


@app.command("classify")
def classify_description(
    description: str = typer.Argument(..., help="Transaction description"),
    merchant: str = typer.Option("", "--merchant", "-m", help="Merchant name"),
    amount: str = typer.Option("0", "--amount", "-a", help="Signed amount"),
    transaction_type: Optional[TransactionType] = typer.Option(
        None,
        "--type",
        "-t",
        help="Declared direction; inferred from the amount sign if omitted",
        case_sensitive=False,
    ),
) -> None:
    """Show which category a description would be filed under."""
    try:
        record = RawImportRecord(
            date=today_utc(),
            amount=Decimal(amount),
            description=description,
            merchant=merchant,
            declared_type=transaction_type,
        )
    except (InvalidOperation, PydanticValidationError):
        # NaN and infinity parse as Decimal but are not valid amounts
        console.print(f"[red]Invalid amount:[/red] {amount}")
        raise typer.Exit(code=2) from None

    classifier = TransactionClassifier()
    rule = classifier.match_rule(record)
    category = classifier.classify(record)

    console.print(f"[bold]{category.label}[/bold] ({infer_type(record).value})")
    if rule is None:
        console.print("[dim]No keyword matched; fallback category used[/dim]")
    else:
        keywords = ", ".join(rule.matched_keywords(description, merchant))
        console.print(f"[dim]Matched: {keywords}[/dim]")


@app.command("import")
def import_transactions(  # noqa: PLR0913
    source_id: str = typer.Argument(..., help="Bank id, see `fintrack banks`"),
    username: str = typer.Option(..., "--username", "-u", prompt=True),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
    ),
    account_number: Optional[str] = typer.Option(None, "--account-number"),
    failure_probability: Optional[float] = typer.Option(
        None,
        "--failure-probability",
        min=0.0,
        max=1.0,
        help="Share of logins the simulated bank refuses",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    fast: bool = typer.Option(False, "--fast", help="Skip simulated latency"),
) -> None:
    """Connect to a simulated bank and import its recent transactions."""
    settings = get_settings()
    bank = SimulatedBankAdapter(
        auth_latency_seconds=0.0 if fast else settings.bank_auth_latency_seconds,
        fetch_latency_seconds=0.0 if fast else settings.bank_fetch_latency_seconds,
        failure_probability=(
            settings.bank_failure_probability
            if failure_probability is None
            else failure_probability
        ),
        rng=random.Random(seed if seed is not None else settings.bank_random_seed),
    )
    command = BankImportCommand.from_factory(
        InMemoryRepositoryFactory(),
        bank_connection=bank,
        settings=settings,
    )

    try:
        with console.status(f"Connecting to {source_id} and importing..."):
            summary = asyncio.run(
                command.execute(
                    source_id=source_id,
                    username=username,
                    password=password,
                    account_number=account_number,
                ),
            )
    except TransactionImportError as e:
        console.print(f"[red]Import failed:[/red] {e.reason}")
        console.print(f"[yellow]{e.imported_count} transaction(s) were stored[/yellow]")
        raise typer.Exit(code=1) from None
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from None

    _print_summary(summary)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host"),
    port: Optional[int] = typer.Option(None, "--port"),
) -> None:
    """Start the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "fintrack.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


def _print_summary(summary: ImportSummary) -> None:
    table = Table(title=f"Imported {summary.count} transaction(s)")
    table.add_column("Date")
    table.add_column("Description")
    table.add_column("Category", style="cyan")
    table.add_column("Amount", justify="right")
    for tx in summary.transactions:
        color = "green" if tx.is_income else "red"
        sign = "+" if tx.is_income else "-"
        table.add_row(
            tx.date.isoformat(),
            tx.description,
            tx.category.label,
            f"[{color}]{sign}{tx.amount:.2f}[/{color}]",
        )
    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
