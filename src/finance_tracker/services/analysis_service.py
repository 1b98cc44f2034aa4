from pathlib import Path
from typing import Optional

from finance_tracker.analyzer import TransactionAnalyzer
from finance_tracker.loaders.base import TransactionLoader
from finance_tracker.loaders.json_loader import JsonTransactionLoader
from finance_tracker.services.models import AnalysisSummary
from finance_tracker.logger import get_logger

logger = get_logger(__name__)

class AnalysisService:

    def __init__(
        self,
        loader: Optional[TransactionLoader] = None,
        strict: bool = True,
    ):
        self._loader: Optional[TransactionLoader] = loader
        self.strict = strict

    @property
    def loader(self) -> TransactionLoader:
        """Lazy-load the default JSON loader"""
        if self._loader is None:
            self._loader = JsonTransactionLoader(strict=self.strict)
        return self._loader

    def load(self, filepath: Path | str) -> TransactionAnalyzer:
        """
        Load a data file into an analyzer.

        Args:
            filepath: Path to the transaction data file

        Returns:
            A TransactionAnalyzer over the loaded transactions

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file or one of its records is invalid
        """
        try:
            transactions = self.loader.load(filepath)
        except (OSError, ValueError) as e:
            logger.error("Error reading file %s: %s", filepath, e)
            raise
        return TransactionAnalyzer(transactions)

    def summarize(self, filepath: Path | str) -> AnalysisSummary:
        """Load a data file and summarize it"""
        return self.load(filepath).summarize()
