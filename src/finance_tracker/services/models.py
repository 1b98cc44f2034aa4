"""
Service layer models - DTOs for service operations.

These models represent the results of service operations, not domain entities.
"""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional
from finance_tracker.domain.enums import DominantType, TransactionType

@dataclass
class AnalysisSummary:
    """
    Aggregate view of a loaded transaction set.

    Built by TransactionAnalyzer.summarize() and rendered by the CLI.
    """
    transaction_count: int
    total_amount: Decimal
    total_debit_amount: Decimal
    average_amount: Decimal
    dominant_type: DominantType
    busiest_month: Optional[str] = None
    busiest_debit_month: Optional[str] = None
    unique_types: List[TransactionType] = field(default_factory=list)

    @property
    def total_credit_amount(self) -> Decimal:
        return self.total_amount - self.total_debit_amount

    @property
    def is_empty(self) -> bool:
        return self.transaction_count == 0

    @staticmethod
    def month_name(month: Optional[str]) -> str:
        """'01' -> 'January'; '-' when there is no month"""
        if month is None:
            return "-"
        return date(2000, int(month), 1).strftime("%B")

    def render(self, currency_symbol: str = "$") -> str:
        """Human-readable summary using the given currency symbol"""
        c = currency_symbol
        lines = [
            "📊 Transaction Summary",
            "",
            f"Transactions: {self.transaction_count}",
            f"  Total:   {c}{self.total_amount:,.2f}",
            f"  💸 Debits:  {c}{self.total_debit_amount:,.2f}",
            f"  💰 Credits: {c}{self.total_credit_amount:,.2f}",
            f"  Average: {c}{self.average_amount:,.2f}",
            f"  Most common type: {self.dominant_type.value}",
            f"  Busiest month: {self.month_name(self.busiest_month)}",
            f"  Busiest debit month: {self.month_name(self.busiest_debit_month)}",
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
