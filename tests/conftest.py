import json
import pytest
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Callable, List

from finance_tracker.domain.enums import TransactionType
from finance_tracker.domain.models import Transaction

@pytest.fixture
def sample_transactions() -> List[Transaction]:
    """A small, mixed set of transactions spanning three months"""
    return [
        Transaction(
            id="1",
            date=date(2019, 1, 1),
            amount=Decimal("100.00"),
            type=TransactionType.DEBIT,
            description="Payment for groceries",
            merchant="SuperMart",
            card_type="Visa",
        ),
        Transaction(
            id="2",
            date=date(2019, 1, 15),
            amount=Decimal("50.50"),
            type=TransactionType.CREDIT,
            description="Refund for returned item",
            merchant="OnlineShop",
            card_type="MasterCard",
        ),
        Transaction(
            id="3",
            date=date(2019, 2, 3),
            amount=Decimal("75.25"),
            type=TransactionType.DEBIT,
            description="Dinner with friends",
            merchant="RestaurantABC",
            card_type="Amex",
        ),
        Transaction(
            id="4",
            date=date(2019, 2, 20),
            amount=Decimal("20.00"),
            type=TransactionType.DEBIT,
            description="Coffee beans",
            merchant="SuperMart",
            card_type="Visa",
        ),
        Transaction(
            id="5",
            date=date(2020, 3, 10),
            amount=Decimal("1200.00"),
            type=TransactionType.CREDIT,
            description="Salary",
            merchant="Employer Inc",
            card_type="Visa",
        ),
    ]

@pytest.fixture
def sample_records() -> List[dict]:
    """Raw records as they appear in a transaction.json file"""
    return [
        {
            "transaction_id": "1",
            "transaction_date": "2019-01-01",
            "transaction_amount": 100.0,
            "transaction_type": "debit",
            "transaction_description": "Payment for groceries",
            "merchant_name": "SuperMart",
            "card_type": "Visa",
        },
        {
            "transaction_id": "2",
            "transaction_date": "2019-01-15",
            "transaction_amount": "50.50",
            "transaction_type": "credit",
            "transaction_description": "Refund for returned item",
            "merchant_name": "OnlineShop",
            "card_type": "MasterCard",
        },
        {
            "transaction_id": "3",
            "transaction_date": "2019-02-03",
            "transaction_amount": 75.25,
            "transaction_type": "debit",
            "transaction_description": "Dinner with friends",
            "merchant_name": "RestaurantABC",
            "card_type": "Amex",
        },
    ]

@pytest.fixture
def write_json(tmp_path) -> Callable[[object, str], Path]:
    """Write any JSON-serializable payload to a file in tmp_path"""
    def _write(payload, name: str = "transaction.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload))
        return path
    return _write

@pytest.fixture
def sample_json_file(write_json, sample_records) -> Path:
    return write_json(sample_records)
