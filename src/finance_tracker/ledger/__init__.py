"""
Manually maintained transaction ledger with a pluggable view.

Quick Start:
    >>> from finance_tracker.ledger import TransactionLedger, RichLedgerRenderer
    >>>
    >>> ledger = TransactionLedger(RichLedgerRenderer())
    >>> ledger.add("2024-01-05", "-12.50", "Food", "Lunch with the team")
"""
from finance_tracker.ledger.base import LedgerRenderer
from finance_tracker.ledger.ledger import (
    TransactionLedger,
    LedgerValidationError,
    LedgerEntryNotFoundError,
    format_total,
)
from finance_tracker.ledger.rich_renderer import RichLedgerRenderer

__all__ = [
    "LedgerRenderer",
    "TransactionLedger",
    "LedgerValidationError",
    "LedgerEntryNotFoundError",
    "RichLedgerRenderer",
    "format_total",
]
