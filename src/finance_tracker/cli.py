import math
import typer
from pathlib import Path
from typing import List, Optional
from datetime import datetime

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from finance_tracker.analyzer import TransactionAnalyzer
from finance_tracker.config.settings import ConfigLoader
from finance_tracker.domain.dates import parse_date
from finance_tracker.domain.enums import TransactionType
from finance_tracker.domain.models import Transaction
from finance_tracker.ledger import (
    LedgerEntryNotFoundError,
    LedgerValidationError,
    RichLedgerRenderer,
    TransactionLedger,
)
from finance_tracker.logger import setup_logging
from finance_tracker.services.analysis_service import AnalysisService
from finance_tracker.services.models import AnalysisSummary

app = typer.Typer(
    name="finance-tracker",
    help="Analyze transaction files and keep a quick running ledger",
    add_completion=False,
)

console = Console()

class State:
    verbose: bool = False
    config: Optional[dict] = None
    service: Optional[AnalysisService] = None


state = State()

@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose output",
    )
):
    """
    Finance Tracker - Analyze transactions and keep a running ledger.
    """
    setup_logging()

    if state.config is None:
        state.config = ConfigLoader.load_app_config()

    if state.service is None:
        state.service = AnalysisService(strict=state.config["strict_loading"])

    state.verbose = verbose


def _resolve_file(filepath: Optional[Path]) -> Path:
    return filepath if filepath is not None else Path(state.config["data_file"])


def _fail(e: Exception):
    console.print(f"[bold red]Error:[/bold red] {e}")
    if state.verbose:
        console.print_exception()
    raise typer.Exit(code=1)


def _parse_date_option(value: Optional[str]):
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not a YYYY-MM-DD date")


def _check_amount_option(value: Optional[float], name: str) -> Optional[float]:
    if value is not None and not math.isfinite(value):
        raise typer.BadParameter(f"{name} must be a finite number, got {value}")
    return value


def _money(amount) -> str:
    return f"{state.config['currency_symbol']}{amount:,.2f}"


def _transactions_table(transactions: List[Transaction], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Merchant", style="magenta")
    table.add_column("Description", style="white", max_width=40)
    table.add_column("Card", style="dim")
    table.add_column("Amount", justify="right")

    for txn in transactions:
        if txn.type == TransactionType.DEBIT:
            amount_str = f"[red]-{_money(txn.amount)}[/red]"
        else:
            amount_str = f"[green]+{_money(txn.amount)}[/green]"

        table.add_row(
            txn.id,
            str(txn.date),
            txn.merchant,
            txn.description,
            txn.card_type,
            amount_str,
        )
    return table


FILE_ARGUMENT = typer.Argument(
    None,
    help="Path to a JSON transaction file (defaults to the configured data_file)",
    dir_okay=False,
)

@app.command(name="analyze")
def analyze(filepath: Optional[Path] = FILE_ARGUMENT):
    """
    Print aggregate statistics for a transaction file.

    Examples:
        finance-tracker analyze
        finance-tracker analyze data/transaction.json
    """
    try:
        filepath = _resolve_file(filepath)
        summary: AnalysisSummary = state.service.summarize(filepath)
    except Exception as e:
        _fail(e)

    if summary.is_empty:
        console.print(Panel(
            "[yellow]No transactions found in this file[/yellow]",
            title="Empty Report",
            border_style="yellow"
        ))
        return

    types = ", ".join(t.value for t in summary.unique_types)
    summary_text = (
        f"[bold]Transactions:[/bold] {summary.transaction_count} ({types})\n\n"
        f"[red]💸 Debits:[/red]   {_money(summary.total_debit_amount):>14}\n"
        f"[green]💰 Credits:[/green]  {_money(summary.total_credit_amount):>14}\n"
        f"{'─' * 30}\n"
        f"[bold]Total:[/bold]      {_money(summary.total_amount):>14}\n"
        f"[bold]Average:[/bold]    {_money(summary.average_amount):>14}\n\n"
        f"[bold]Most common type:[/bold] {summary.dominant_type.value}\n"
        f"[bold]Busiest month:[/bold] {summary.month_name(summary.busiest_month)}\n"
        f"[bold]Busiest debit month:[/bold] {summary.month_name(summary.busiest_debit_month)}"
    )

    console.print(Panel(
        summary_text,
        title=f"[bold]{filepath.name} Summary[/bold]",
        border_style="cyan",
        padding=(1, 2)
    ))

    if state.verbose:
        console.print(f"\n[dim]→ Report generated successfully[/dim]")


@app.command(name="transactions")
def transactions(
    filepath: Optional[Path] = FILE_ARGUMENT,
    transaction_type: Optional[TransactionType] = typer.Option(
        None,
        "--type", "-t",
        help="Only debit or credit transactions",
        case_sensitive=False,
    ),
    merchant: Optional[str] = typer.Option(
        None,
        "--merchant", "-m",
        help="Exact merchant name",
    ),
    start: Optional[str] = typer.Option(
        None,
        "--start",
        help="Include transactions on or after this date (YYYY-MM-DD)",
    ),
    end: Optional[str] = typer.Option(
        None,
        "--end",
        help="Include transactions on or before this date (YYYY-MM-DD)",
    ),
    before: Optional[str] = typer.Option(
        None,
        "--before",
        help="Only transactions strictly before this date (YYYY-MM-DD)",
    ),
    min_amount: Optional[float] = typer.Option(
        None,
        "--min",
        help="Minimum amount (inclusive)",
    ),
    max_amount: Optional[float] = typer.Option(
        None,
        "--max",
        help="Maximum amount (inclusive)",
    ),
):
    """
    List transactions matching every given filter.

    Examples:
        finance-tracker transactions --type debit
        finance-tracker transactions --start 2019-01-01 --end 2019-01-31
        finance-tracker transactions --merchant SuperMart --min 50
    """
    start_date = _parse_date_option(start)
    end_date = _parse_date_option(end)
    before_date = _parse_date_option(before)
    min_amount = _check_amount_option(min_amount, "--min")
    max_amount = _check_amount_option(max_amount, "--max")

    try:
        analyzer = state.service.load(_resolve_file(filepath))
    except Exception as e:
        _fail(e)

    # Narrow step by step, each filter runs on the previous result
    if transaction_type is not None:
        analyzer = TransactionAnalyzer(analyzer.by_type(transaction_type))
    if merchant is not None:
        analyzer = TransactionAnalyzer(analyzer.by_merchant(merchant))
    if start_date is not None or end_date is not None:
        analyzer = TransactionAnalyzer(analyzer.in_date_range(
            start_date or datetime.min.date(),
            end_date or datetime.max.date(),
        ))
    if before_date is not None:
        analyzer = TransactionAnalyzer(analyzer.before_date(before_date))
    if min_amount is not None or max_amount is not None:
        analyzer = TransactionAnalyzer(analyzer.by_amount_range(
            min_amount if min_amount is not None else float("-inf"),
            max_amount if max_amount is not None else float("inf"),
        ))

    if len(analyzer) == 0:
        console.print("[yellow]No matching transactions[/yellow]")
        return

    console.print(_transactions_table(list(analyzer.transactions), "Transactions"))
    console.print(
        f"\n[bold]{len(analyzer)} transactions, total {_money(analyzer.total_amount())}[/bold]"
    )


@app.command(name="find")
def find(
    transaction_id: str = typer.Argument(..., help="Transaction id"),
    filepath: Optional[Path] = typer.Option(
        None,
        "--file", "-f",
        help="Path to a JSON transaction file",
        dir_okay=False,
    ),
):
    """
    Show the details of one transaction.

    Examples:
        finance-tracker find 42
    """
    try:
        analyzer = state.service.load(_resolve_file(filepath))
    except Exception as e:
        _fail(e)

    txn = analyzer.find_by_id(transaction_id)
    if txn is None:
        console.print(f"[bold red]Error:[/bold red] No transaction with id '{transaction_id}'")
        raise typer.Exit(code=1)

    console.print(Panel.fit(
        f"ID: {txn.id}\n"
        f"Date: {txn.date}\n"
        f"Amount: {_money(txn.amount)}\n"
        f"Type: {txn.type.value}\n"
        f"Description: {txn.description}\n"
        f"Merchant: {txn.merchant}\n"
        f"Card: {txn.card_type}",
        title=f"Transaction {txn.id}",
        border_style="green" if txn.type == TransactionType.CREDIT else "red",
    ))


@app.command(name="descriptions")
def descriptions(filepath: Optional[Path] = FILE_ARGUMENT):
    """
    Print every transaction description, one per line.
    """
    try:
        analyzer = state.service.load(_resolve_file(filepath))
    except Exception as e:
        _fail(e)

    for description in analyzer.descriptions():
        console.print(description, markup=False, highlight=False)


LEDGER_HELP = (
    "Commands: [cyan]add[/cyan], [cyan]delete ID[/cyan], [cyan]show ID[/cyan], "
    "[cyan]list[/cyan], [cyan]quit[/cyan]"
)

@app.command(name="ledger")
def ledger():
    """
    Start an interactive ledger session.

    Add and delete transactions and keep an eye on the running total.
    Nothing is saved when the session ends.
    """
    renderer = RichLedgerRenderer(console)
    book = TransactionLedger(renderer)

    console.print(Panel.fit(LEDGER_HELP, title="Ledger", border_style="cyan"))

    while True:
        command = typer.prompt(">", default="", show_default=False).strip()
        if not command:
            continue

        action, _, argument = command.partition(" ")
        action = action.lower()

        if action in ("quit", "exit", "q"):
            break

        if action == "add":
            try:
                book.add(
                    date=typer.prompt("Date (YYYY-MM-DD)", default="", show_default=False),
                    amount=typer.prompt("Amount", default="", show_default=False),
                    category=typer.prompt("Category", default="", show_default=False),
                    description=typer.prompt("Description", default="", show_default=False),
                )
            except LedgerValidationError as e:
                console.print(f"[bold red]{e}[/bold red]")
        elif action in ("delete", "show"):
            try:
                entry_id = int(argument)
            except ValueError:
                console.print(f"[bold red]Usage: {action} ID[/bold red]")
                continue

            if action == "delete":
                book.remove(entry_id)
                continue

            try:
                book.show_details(entry_id)
            except LedgerEntryNotFoundError:
                console.print(f"[yellow]No transaction #{entry_id}[/yellow]")
        elif action == "list":
            renderer.draw()
        else:
            console.print(LEDGER_HELP)

    console.print(f"[dim]{len(book)} transactions, session ended[/dim]")


def cli_main():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    cli_main()
