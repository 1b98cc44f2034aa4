from abc import ABC, abstractmethod
from decimal import Decimal

from finance_tracker.domain.models import LedgerEntry

class LedgerRenderer(ABC):
    """
    View collaborator for a TransactionLedger.

    The ledger owns the entries and the arithmetic; a renderer only
    mirrors what the ledger tells it into some display.
    """

    @abstractmethod
    def render(self, entry: LedgerEntry) -> None:
        """Show a newly added entry as a row"""
        pass

    @abstractmethod
    def remove_row(self, entry_id: int) -> None:
        """Drop the row of a deleted entry"""
        pass

    @abstractmethod
    def set_total(self, total: Decimal) -> None:
        """Display the current ledger total"""
        pass

    @abstractmethod
    def show_details(self, entry: LedgerEntry) -> None:
        """Display every field of one entry"""
        pass

    def reset_form(self) -> None:
        """Clear any pending input after a successful add"""
        pass
