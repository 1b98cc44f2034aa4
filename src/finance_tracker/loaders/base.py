from abc import ABC, abstractmethod
from pathlib import Path
from typing import List
from finance_tracker.domain.models import Transaction

class TransactionLoadError(ValueError):
    """Raised when a data file contains a record that cannot be loaded."""
    pass

class TransactionLoader(ABC):
    """
    Abstract base class for transaction data loaders.

    Each file format gets its own concrete loader that implements
    this interface.
    """

    @abstractmethod
    def load(self, filepath: Path | str) -> List[Transaction]:
        """
        Load a data file and return its transactions in file order.

        Args:
            filepath: Path to the data file

        Returns:
            List of Transaction objects

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is invalid
            TransactionLoadError: If a record is malformed
        """
        pass

    @abstractmethod
    def validate_file(self, filepath: Path | str):
        """
        Validate that the file matches the expected format.

        Args:
            filepath: Path to the data file

        Returns:
            Nothing if file is valid for this loader

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is invalid
        """
        pass
