from decimal import Decimal
from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from finance_tracker.domain.models import LedgerEntry
from finance_tracker.ledger.base import LedgerRenderer
from finance_tracker.ledger.ledger import format_total

class RichLedgerRenderer(LedgerRenderer):
    """
    Terminal view of a ledger.

    Keeps its own copy of the rows it was told about so the whole table
    can be redrawn on demand with draw().
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.rows: Dict[int, LedgerEntry] = {}
        self.total: Decimal = Decimal("0")

    def render(self, entry: LedgerEntry) -> None:
        self.rows[entry.id] = entry
        color = self._row_style(entry)
        self.console.print(
            f"[{color}]+ #{entry.id}[/{color}] {entry.date} {entry.category} {entry.summary}"
        )

    def remove_row(self, entry_id: int) -> None:
        self.rows.pop(entry_id, None)
        self.console.print(f"[dim]- #{entry_id} deleted[/dim]")

    def set_total(self, total: Decimal) -> None:
        self.total = total
        self.console.print(f"[bold]{format_total(total)}[/bold]")

    def show_details(self, entry: LedgerEntry) -> None:
        self.console.print(Panel.fit(
            f"ID: {entry.id}\n"
            f"Date: {entry.date}\n"
            f"Amount: {entry.amount}\n"
            f"Category: {entry.category}\n"
            f"Description: {entry.description}",
            title=f"Transaction #{entry.id}",
            border_style=self._row_style(entry),
        ))

    def draw(self) -> None:
        """Print every known row followed by the total"""
        table = Table(title="Transactions")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Date", style="cyan")
        table.add_column("Category", style="magenta")
        table.add_column("Description", style="white")
        table.add_column("Amount", justify="right")

        for entry in self.rows.values():
            color = self._row_style(entry)
            table.add_row(
                str(entry.id),
                str(entry.date),
                entry.category,
                entry.summary,
                f"[{color}]{entry.amount}[/{color}]",
            )

        self.console.print(table)
        self.console.print(f"[bold]{format_total(self.total)}[/bold]")

    @staticmethod
    def _row_style(entry: LedgerEntry) -> str:
        return "green" if entry.is_inflow else "red"
