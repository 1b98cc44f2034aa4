from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

from finance_tracker.domain.dates import parse_date
from finance_tracker.domain.models import LedgerEntry
from finance_tracker.ledger.base import LedgerRenderer
from finance_tracker.logger import get_logger

logger = get_logger(__name__)

class LedgerValidationError(ValueError):
    """Raised when a new ledger entry is missing fields or has bad values."""
    pass

class LedgerEntryNotFoundError(KeyError):
    """Raised when a ledger entry id does not exist."""
    pass


def format_total(total: Decimal) -> str:
    return f"Total Amount: {total}"


class TransactionLedger:
    """
    Mutable working list of manually entered transactions.

    Every change is pushed to the injected renderer so the view always
    mirrors the entries held here. Entries keep insertion order and get
    auto-incrementing integer ids starting at 0.
    """

    def __init__(
        self,
        renderer: LedgerRenderer,
        entries: Optional[List[LedgerEntry]] = None,
    ):
        self.renderer = renderer
        self._entries: List[LedgerEntry] = entries if entries is not None else []
        self._next_id = max((e.id for e in self._entries), default=-1) + 1

    @property
    def entries(self) -> tuple[LedgerEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(
        self,
        date: date | str,
        amount: Decimal | int | float | str,
        category: str,
        description: str,
    ) -> LedgerEntry:
        """
        Validate and append a new entry.

        Args:
            date: Entry date, as a date or 'YYYY-MM-DD' string
            amount: Signed amount; positive values are inflows
            category: Category name
            description: Free-text description

        Returns:
            The stored entry with its id assigned

        Raises:
            LedgerValidationError: If a field is empty or unparseable
        """
        if any(_is_blank(value) for value in (date, amount, category, description)):
            raise LedgerValidationError("All fields are required.")

        entry = LedgerEntry(
            id=self._next_id,
            date=_parse_date(date),
            amount=_parse_amount(amount),
            category=category.strip(),
            description=description.strip(),
        )
        self._next_id += 1
        self._entries.append(entry)
        logger.debug("Added ledger entry %s", entry)

        self.renderer.render(entry)
        self._refresh_total()
        self.renderer.reset_form()
        return entry

    def remove(self, entry_id: int) -> bool:
        """
        Remove the entry with the given id.

        Returns:
            True if removed, False if no entry has that id
        """
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[index]
                break
        else:
            return False

        self.renderer.remove_row(entry_id)
        self._refresh_total()
        return True

    def get(self, entry_id: int) -> LedgerEntry:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        raise LedgerEntryNotFoundError(entry_id)

    def total(self) -> Decimal:
        return sum((e.amount for e in self._entries), Decimal("0"))

    def show_details(self, entry_id: int) -> LedgerEntry:
        entry = self.get(entry_id)
        self.renderer.show_details(entry)
        return entry

    def _refresh_total(self) -> None:
        self.renderer.set_total(self.total())


def _is_blank(value: Any) -> bool:
    # Only missing or empty input counts, a zero amount is a real value
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _parse_date(value: date | str) -> date:
    try:
        return parse_date(value)
    except ValueError:
        raise LedgerValidationError(f"Date must be in YYYY-MM-DD format, got '{value}'.")


def _parse_amount(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, bool):
        raise LedgerValidationError(f"Amount must be a number, got '{value}'.")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise LedgerValidationError(f"Amount must be a number, got '{value}'.")
    if not amount.is_finite():
        raise LedgerValidationError(f"Amount must be a number, got '{value}'.")
    return amount
