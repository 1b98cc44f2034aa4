import json
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, List

import pandas as pd

from finance_tracker.domain.dates import parse_date
from finance_tracker.domain.enums import TransactionType
from finance_tracker.domain.models import Transaction
from finance_tracker.loaders.base import TransactionLoader, TransactionLoadError
from finance_tracker.logger import get_logger

logger = get_logger(__name__)

class JsonTransactionLoader(TransactionLoader):
    """
    Loader for JSON data files holding an array of transaction objects.

    Each object is expected to look like:
        {
            "transaction_id": "1",
            "transaction_date": "2019-01-01",
            "transaction_amount": 100.0,
            "transaction_type": "debit",
            "transaction_description": "Payment for groceries",
            "merchant_name": "SuperMart",
            "card_type": "Visa"
        }
    """

    ID_COL = "transaction_id"
    DATE_COL = "transaction_date"
    AMOUNT_COL = "transaction_amount"
    TYPE_COL = "transaction_type"
    DESCRIPTION_COL = "transaction_description"
    MERCHANT_COL = "merchant_name"
    CARD_TYPE_COL = "card_type"

    REQUIRED_COLUMNS = [
        ID_COL, DATE_COL, AMOUNT_COL, TYPE_COL,
        DESCRIPTION_COL, MERCHANT_COL, CARD_TYPE_COL,
    ]

    def __init__(self, strict: bool = True):
        """
        Args:
            strict: Raise on the first malformed record. When False,
                malformed records are logged and skipped.
        """
        self.strict = strict

    def validate_file(self, filepath):
        path = Path(filepath)

        if not path.exists():
            raise FileNotFoundError(f"File does not exist on path {path}")

        if path.suffix.lower() != ".json":
            raise ValueError(f"File must be .json, got {path.suffix}")

    def load(self, filepath) -> List[Transaction]:
        self.validate_file(filepath)

        df = self._read(filepath)
        self._validate_columns(df)

        transactions = []
        seen_ids = set()
        for index, row in df.iterrows():
            try:
                transaction = self._parse_row(row)
            except (TypeError, ValueError) as e:
                if self.strict:
                    raise TransactionLoadError(f"Record {index}: {e}") from e
                logger.warning("Skipping record %s in %s: %s", index, filepath, e)
                continue

            if transaction.id in seen_ids:
                raise TransactionLoadError(
                    f"Record {index}: duplicate transaction id '{transaction.id}'"
                )
            seen_ids.add(transaction.id)
            transactions.append(transaction)

        logger.info("Loaded %d transactions from %s", len(transactions), filepath)
        return transactions

    def _read(self, filepath) -> pd.DataFrame:
        """Read the raw records, keeping every value as written in the file"""
        try:
            with open(filepath, encoding="utf-8") as f:
                payload = json.load(f)
        except ValueError as e:
            raise ValueError(f"Failed to read JSON file {filepath}: {e}") from e

        if not isinstance(payload, list) or not all(isinstance(r, dict) for r in payload):
            raise ValueError(f"Expected a JSON array of transactions in {filepath}")

        df = pd.DataFrame.from_records(payload)
        if df.empty:
            return df

        return df.astype(object).where(df.notna(), None)

    def _validate_columns(self, df: pd.DataFrame):
        if df.empty:
            return

        missing = [col for col in self.REQUIRED_COLUMNS if col not in df.columns]
        if missing and self.strict:
            raise TransactionLoadError(f"Missing required fields: {', '.join(missing)}")

    def _parse_row(self, row: pd.Series) -> Transaction:
        return Transaction(
            id=self._parse_text(row.get(self.ID_COL), self.ID_COL),
            date=self._parse_date(row.get(self.DATE_COL)),
            amount=self._parse_amount(row.get(self.AMOUNT_COL)),
            type=self._parse_type(row.get(self.TYPE_COL)),
            description=self._parse_text(row.get(self.DESCRIPTION_COL), self.DESCRIPTION_COL),
            merchant=self._parse_text(row.get(self.MERCHANT_COL), self.MERCHANT_COL),
            card_type=self._parse_text(row.get(self.CARD_TYPE_COL), self.CARD_TYPE_COL),
        )

    @staticmethod
    def _parse_text(value: Any, field: str) -> str:
        if value is None:
            raise ValueError(f"Missing field '{field}'")
        # Integral ids may be written as numbers
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value)

    @staticmethod
    def _parse_date(value: Any) -> date:
        if not isinstance(value, str):
            raise ValueError(f"Date must be a 'YYYY-MM-DD' string, got {value!r}")
        return parse_date(value)

    @staticmethod
    def _parse_amount(value: Any) -> Decimal:
        if value is None or isinstance(value, bool):
            raise ValueError(f"Invalid amount {value!r}")
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid amount {value!r}")
        if not amount.is_finite():
            raise ValueError(f"Invalid amount {value!r}")
        return amount

    @staticmethod
    def _parse_type(value: Any) -> TransactionType:
        try:
            return TransactionType(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown transaction type {value!r}")
