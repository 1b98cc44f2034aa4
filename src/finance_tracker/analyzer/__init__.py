"""
Aggregate and filter queries over loaded transactions.

Quick Start:
    >>> from finance_tracker.analyzer import TransactionAnalyzer
    >>>
    >>> analyzer = TransactionAnalyzer(transactions)
    >>> print(analyzer.total_amount())
"""
from finance_tracker.analyzer.analyzer import TransactionAnalyzer

__all__ = [
    "TransactionAnalyzer",
]
