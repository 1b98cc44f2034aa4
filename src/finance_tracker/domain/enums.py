from enum import Enum

class TransactionType(Enum):
    """Represents whether money is coming in or out"""
    DEBIT = "debit" # out
    CREDIT = "credit" # in


class DominantType(Enum):
    """Which transaction type occurs more often in a set of records"""
    DEBIT = "debit"
    CREDIT = "credit"
    EQUAL = "equal"
