"""
Base loader abstract class for ledger file loaders.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import pandas as pd

from mwr.core.exceptions import LedgerFormatError
from mwr.core.models import Transaction, TransactionType
from mwr.utils.helpers import normalise_column_name


logger = logging.getLogger(__name__)


class BaseLoader(ABC):
    """Abstract base class for ledger file loaders."""

    # Normalised column names that must be present
    required_columns: tuple[str, ...] = ()

    def __init__(self, path: Path):
        """
        Initialise the loader.

        Args:
            path: Path to the ledger CSV file.
        """
        self.path = Path(path)
        logger.info(f"Initialised {self.__class__.__name__} with {self.path}")

    def load(self) -> list[Transaction]:
        """
        Load all transactions from the ledger file.

        Rows that cannot be parsed are logged and skipped.

        Returns:
            List of Transaction objects sorted by date.

        Raises:
            LedgerFormatError: If the file is empty or required columns are missing.
        """
        if not self.path.exists():
            logger.warning(f"Ledger file does not exist: {self.path}")
            return []

        logger.info(f"Loading ledger file: {self.path.name}")
        df = self._read_frame()

        transactions: list[Transaction] = []
        for index, row in df.iterrows():
            try:
                transaction = self._parse_row(row)
            except (ValueError, KeyError) as e:
                logger.warning(f"Skipping row {index} of {self.path.name}: {e}")
                continue
            if transaction:
                transactions.append(transaction)

        transactions.sort(key=lambda t: t.date)
        logger.info(f"Loaded {len(transactions)} transactions from {self.path.name}")
        return transactions

    def _read_frame(self) -> pd.DataFrame:
        """Read the CSV and normalise its headers."""
        try:
            df = pd.read_csv(self.path, dtype=str, encoding="utf-8-sig")
        except pd.errors.EmptyDataError as e:
            raise LedgerFormatError(f"{self.path.name} is empty") from e
        df.columns = [normalise_column_name(c) for c in df.columns]

        missing = [c for c in self.required_columns if c not in df.columns]
        if missing:
            raise LedgerFormatError(
                f"{self.path.name} is missing required columns: {', '.join(missing)}"
            )
        return df

    @abstractmethod
    def _parse_row(self, row: pd.Series) -> Optional[Transaction]:
        """
        Parse a single row into a Transaction.

        Args:
            row: A pandas Series with normalised column names.

        Returns:
            Transaction object or None if row should be skipped.
        """
        pass

    @abstractmethod
    def _determine_transaction_type(self, row: pd.Series) -> Optional[TransactionType]:
        """
        Determine the transaction type from a row.

        Args:
            row: A pandas Series with normalised column names.

        Returns:
            TransactionType enum value, or None if the row is not a ledger event.
        """
        pass
