import json
from dataclasses import dataclass
from decimal import Decimal
from datetime import date
from finance_tracker.domain.enums import TransactionType

@dataclass(frozen=True)
class Transaction:
    """Core domain model representing a single card transaction"""
    id: str
    date: date
    amount: Decimal
    type: TransactionType
    description: str
    merchant: str
    card_type: str

    @property
    def month(self) -> str:
        """Two-digit month key, e.g. '01'"""
        return f"{self.date.month:02d}"

    def to_dict(self) -> dict:
        """Serialize using the field names of the JSON data file"""
        return {
            "transaction_id": self.id,
            "transaction_date": self.date.isoformat(),
            "transaction_amount": float(self.amount),
            "transaction_type": self.type.value,
            "transaction_description": self.description,
            "merchant_name": self.merchant,
            "card_type": self.card_type,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __repr__(self):
        sign = "+" if self.type == TransactionType.CREDIT else "-"
        return f"Transaction({self.id}, {self.date}, {self.merchant[:30]}, {sign}${self.amount})"


@dataclass(frozen=True)
class LedgerEntry:
    """A manually entered ledger row. Positive amounts are inflows."""
    id: int
    date: date
    amount: Decimal
    category: str
    description: str

    @property
    def summary(self) -> str:
        """First four words of the description, used in table rows"""
        return " ".join(self.description.split()[:4])

    @property
    def is_inflow(self) -> bool:
        return self.amount > 0
