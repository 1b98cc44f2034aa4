from collections import Counter
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

from finance_tracker.domain.dates import parse_date
from finance_tracker.domain.enums import DominantType, TransactionType
from finance_tracker.domain.models import Transaction
from finance_tracker.services.models import AnalysisSummary

DateLike = date | str
AmountLike = Decimal | int | float | str


def to_date(value: DateLike) -> date:
    """Accept a date, a datetime or an ISO 'YYYY-MM-DD' string"""
    return parse_date(value)


def to_decimal(value: AmountLike) -> Decimal:
    # str() first so floats keep their shortest repr instead of binary noise
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if amount.is_nan():
        raise ValueError(f"Amount bound must be a number, got {value!r}")
    return amount


def _sum(transactions: Iterable[Transaction]) -> Decimal:
    return sum((t.amount for t in transactions), Decimal("0"))


def _busiest_month(transactions: Iterable[Transaction]) -> Optional[str]:
    counts = Counter(t.month for t in transactions)
    if not counts:
        return None
    # most_common keeps first-seen order among equal counts
    month, _ = counts.most_common(1)[0]
    return month


class TransactionAnalyzer:
    """
    Read-only queries over a fixed set of transactions.

    The records are copied on construction; every filter returns a new
    list and nothing here mutates the transactions.

    Usage:
        ```
        analyzer = TransactionAnalyzer(loader.load("transaction.json"))
        analyzer.total_amount()
        analyzer.in_date_range("2019-01-01", "2019-01-31")
        ```
    """

    def __init__(self, transactions: Sequence[Transaction] = ()):
        self._transactions = tuple(transactions)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    def __len__(self) -> int:
        return len(self._transactions)

    def unique_types(self) -> List[TransactionType]:
        """Distinct transaction types, in the order first seen"""
        return list(dict.fromkeys(t.type for t in self._transactions))

    def total_amount(self) -> Decimal:
        return _sum(self._transactions)

    def total_amount_by_date(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> Decimal:
        """
        Sum amounts for transactions matching the given date components.

        Any component left as None matches every value, so
        total_amount_by_date(year=2019) totals the whole year and
        total_amount_by_date(month=1) totals every January.
        """
        return _sum(
            t for t in self._transactions
            if (year is None or t.date.year == year)
            and (month is None or t.date.month == month)
            and (day is None or t.date.day == day)
        )

    def by_type(self, transaction_type: TransactionType | str) -> List[Transaction]:
        transaction_type = TransactionType(transaction_type)
        return [t for t in self._transactions if t.type == transaction_type]

    def in_date_range(self, start_date: DateLike, end_date: DateLike) -> List[Transaction]:
        """Transactions dated between start_date and end_date, both inclusive"""
        start, end = to_date(start_date), to_date(end_date)
        return [t for t in self._transactions if start <= t.date <= end]

    def by_merchant(self, merchant: str) -> List[Transaction]:
        return [t for t in self._transactions if t.merchant == merchant]

    def average_amount(self) -> Decimal:
        """Mean amount, or 0 when there are no transactions"""
        if not self._transactions:
            return Decimal("0")
        return self.total_amount() / len(self._transactions)

    def by_amount_range(self, min_amount: AmountLike, max_amount: AmountLike) -> List[Transaction]:
        """Transactions with min_amount <= amount <= max_amount"""
        low, high = to_decimal(min_amount), to_decimal(max_amount)
        return [t for t in self._transactions if low <= t.amount <= high]

    def total_debit_amount(self) -> Decimal:
        return _sum(self.by_type(TransactionType.DEBIT))

    def month_with_most_transactions(self) -> Optional[str]:
        """
        Two-digit month ('01'..'12') with the most transactions.

        Months are grouped regardless of year. Ties go to the month seen
        first. Returns None when there are no transactions.
        """
        return _busiest_month(self._transactions)

    def month_with_most_debit_transactions(self) -> Optional[str]:
        """Like month_with_most_transactions, counting debits only"""
        return _busiest_month(self.by_type(TransactionType.DEBIT))

    def dominant_type(self) -> DominantType:
        counts = Counter(t.type for t in self._transactions)
        debits = counts[TransactionType.DEBIT]
        credits = counts[TransactionType.CREDIT]

        if debits > credits:
            return DominantType.DEBIT
        if credits > debits:
            return DominantType.CREDIT
        return DominantType.EQUAL

    def before_date(self, cutoff: DateLike) -> List[Transaction]:
        """Transactions strictly before the cutoff date"""
        cutoff = to_date(cutoff)
        return [t for t in self._transactions if t.date < cutoff]

    def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        return next(
            (t for t in self._transactions if t.id == transaction_id),
            None
        )

    def descriptions(self) -> List[str]:
        return [t.description for t in self._transactions]

    def summarize(self) -> AnalysisSummary:
        """Collect the aggregate answers into one report object"""
        return AnalysisSummary(
            transaction_count=len(self._transactions),
            total_amount=self.total_amount(),
            total_debit_amount=self.total_debit_amount(),
            average_amount=self.average_amount(),
            dominant_type=self.dominant_type(),
            busiest_month=self.month_with_most_transactions(),
            busiest_debit_month=self.month_with_most_debit_transactions(),
            unique_types=self.unique_types(),
        )
