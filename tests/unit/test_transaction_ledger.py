import pytest
from datetime import date
from decimal import Decimal

from finance_tracker.domain.models import LedgerEntry
from finance_tracker.ledger import (
    LedgerEntryNotFoundError,
    LedgerRenderer,
    LedgerValidationError,
    TransactionLedger,
    format_total,
)

@pytest.fixture
def renderer(mocker) -> LedgerRenderer:
    """Create a mock renderer"""
    return mocker.Mock(spec=LedgerRenderer)

@pytest.fixture
def ledger(renderer) -> TransactionLedger:
    return TransactionLedger(renderer)

@pytest.mark.unit
class TestLedgerAdd:

    def test_add_assigns_incrementing_ids(self, ledger: TransactionLedger):
        # Act
        first = ledger.add("2024-01-05", "100", "Salary", "January pay")
        second = ledger.add("2024-01-06", "-20.5", "Food", "Groceries")

        # Assert
        assert first.id == 0
        assert second.id == 1
        assert [e.id for e in ledger.entries] == [0, 1]

    def test_add_parses_fields(self, ledger: TransactionLedger):
        entry = ledger.add(" 2024-01-05 ", " -12.50 ", " Food ", " Lunch ")

        assert entry == LedgerEntry(
            id=0,
            date=date(2024, 1, 5),
            amount=Decimal("-12.50"),
            category="Food",
            description="Lunch",
        )

    def test_add_accepts_typed_values(self, ledger: TransactionLedger):
        entry = ledger.add(date(2024, 1, 5), 42, "Gift", "Birthday money")

        assert entry.amount == Decimal("42")
        assert entry.date == date(2024, 1, 5)

    def test_add_notifies_renderer(self, ledger: TransactionLedger, renderer):
        # Act
        entry = ledger.add("2024-01-05", "100", "Salary", "January pay")

        # Assert
        renderer.render.assert_called_once_with(entry)
        renderer.set_total.assert_called_once_with(Decimal("100"))
        renderer.reset_form.assert_called_once_with()

    def test_zero_amount_is_accepted(self, ledger: TransactionLedger):
        entry = ledger.add("2024-01-05", "0", "Misc", "Free sample")

        assert entry.amount == Decimal("0")
        assert len(ledger) == 1

    @pytest.mark.parametrize("field", ["date", "amount", "category", "description"])
    def test_missing_field_rejected(self, ledger: TransactionLedger, renderer, field):
        # Arrange
        values = {
            "date": "2024-01-05",
            "amount": "10",
            "category": "Food",
            "description": "Lunch",
        }
        values[field] = "   "

        # Act & Assert
        with pytest.raises(LedgerValidationError, match="All fields are required."):
            ledger.add(**values)

        assert len(ledger) == 0
        renderer.render.assert_not_called()
        renderer.set_total.assert_not_called()

    def test_none_field_rejected(self, ledger: TransactionLedger):
        with pytest.raises(LedgerValidationError):
            ledger.add("2024-01-05", None, "Food", "Lunch")

    def test_non_numeric_amount_rejected(self, ledger: TransactionLedger, renderer):
        with pytest.raises(LedgerValidationError, match="Amount must be a number"):
            ledger.add("2024-01-05", "ten", "Food", "Lunch")

        renderer.render.assert_not_called()

    def test_nan_amount_rejected(self, ledger: TransactionLedger):
        with pytest.raises(LedgerValidationError):
            ledger.add("2024-01-05", "NaN", "Food", "Lunch")

    def test_bad_date_rejected(self, ledger: TransactionLedger):
        with pytest.raises(LedgerValidationError, match="YYYY-MM-DD"):
            ledger.add("05/01/2024", "10", "Food", "Lunch")

    def test_failed_add_does_not_consume_id(self, ledger: TransactionLedger):
        with pytest.raises(LedgerValidationError):
            ledger.add("2024-01-05", "ten", "Food", "Lunch")

        assert ledger.add("2024-01-05", "10", "Food", "Lunch").id == 0

@pytest.mark.unit
class TestLedgerRemove:

    def test_remove_existing(self, ledger: TransactionLedger, renderer):
        # Arrange
        ledger.add("2024-01-05", "100", "Salary", "January pay")
        ledger.add("2024-01-06", "-30", "Food", "Groceries")
        renderer.reset_mock()

        # Act
        removed = ledger.remove(0)

        # Assert
        assert removed is True
        assert [e.id for e in ledger.entries] == [1]
        renderer.remove_row.assert_called_once_with(0)
        renderer.set_total.assert_called_once_with(Decimal("-30"))

    def test_remove_missing_is_silent_noop(self, ledger: TransactionLedger, renderer):
        # Arrange
        ledger.add("2024-01-05", "100", "Salary", "January pay")
        renderer.reset_mock()

        # Act
        removed = ledger.remove(42)

        # Assert
        assert removed is False
        assert len(ledger) == 1
        renderer.remove_row.assert_not_called()
        renderer.set_total.assert_not_called()

    def test_ids_not_reused_after_remove(self, ledger: TransactionLedger):
        ledger.add("2024-01-05", "1", "A", "First")
        ledger.remove(0)

        assert ledger.add("2024-01-05", "2", "B", "Second").id == 1

@pytest.mark.unit
class TestLedgerTotalAndDetails:

    def test_total(self, ledger: TransactionLedger):
        ledger.add("2024-01-05", "100.10", "Salary", "Pay")
        ledger.add("2024-01-06", "-30.05", "Food", "Groceries")

        assert ledger.total() == Decimal("70.05")

    def test_total_empty(self, ledger: TransactionLedger):
        assert ledger.total() == Decimal("0")

    def test_format_total(self):
        assert format_total(Decimal("70.05")) == "Total Amount: 70.05"

    def test_show_details(self, ledger: TransactionLedger, renderer):
        entry = ledger.add("2024-01-05", "100", "Salary", "January pay")

        ledger.show_details(entry.id)

        renderer.show_details.assert_called_once_with(entry)

    def test_show_details_missing(self, ledger: TransactionLedger):
        with pytest.raises(LedgerEntryNotFoundError):
            ledger.show_details(7)

    def test_injected_entries_continue_numbering(self, renderer):
        # Arrange
        existing = [
            LedgerEntry(id=4, date=date(2024, 1, 1), amount=Decimal("5"),
                        category="A", description="Existing"),
        ]

        # Act
        ledger = TransactionLedger(renderer, entries=existing)
        entry = ledger.add("2024-01-02", "1", "B", "New")

        # Assert
        assert entry.id == 5
        assert ledger.total() == Decimal("6")
        assert existing[-1] is entry
