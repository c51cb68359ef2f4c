"""
Canonical ledger CSV loader.

Expected columns (header case and spacing are ignored):
    Date, Type, Symbol, Shares, PricePerShare, CurrentPrice, CashAmount
"""
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from mwr.core.models import Transaction, TransactionType
from mwr.utils.helpers import parse_date, parse_money, parse_quantity
from .base import BaseLoader


logger = logging.getLogger(__name__)


class CsvLoader(BaseLoader):
    """Loader for ledgers already in the canonical transaction format."""

    required_columns = ("date", "type")

    def __init__(self, path: Path, date_format: Optional[str] = None):
        """
        Initialise the CSV loader.

        Args:
            path: Path to the ledger CSV file.
            date_format: Optional strptime format. Common formats are tried if omitted.
        """
        super().__init__(path)
        self.date_formats = [date_format] if date_format else None

    def _parse_row(self, row: pd.Series) -> Optional[Transaction]:
        """Parse a canonical CSV row into a Transaction."""
        tx_type = self._determine_transaction_type(row)
        if tx_type is None:
            return None

        tx_date = parse_date(row.get("date"), self.date_formats)
        if not tx_date:
            raise ValueError(f"invalid date {row.get('date')!r}")

        symbol = row.get("symbol")
        return Transaction(
            date=tx_date,
            transaction_type=tx_type,
            symbol="" if pd.isna(symbol) else str(symbol).strip(),
            shares=parse_quantity(row.get("shares")),
            price_per_share=parse_money(row.get("pricepershare")),
            cash_amount=parse_money(row.get("cashamount")),
            current_price=parse_money(row.get("currentprice")),
        )

    def _determine_transaction_type(self, row: pd.Series) -> Optional[TransactionType]:
        """Determine the transaction type from the Type column."""
        value = row.get("type")
        if pd.isna(value) or not str(value).strip():
            logger.warning(f"Skipping row with no transaction type: {row.get('date')}")
            return None
        return TransactionType.from_string(value)
