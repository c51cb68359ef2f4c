"""
Merrill Edge transaction export loader.

Maps the broker's activity export onto canonical transactions and can
write them back out in the canonical CSV format.
"""
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from mwr.core.models import Transaction, TransactionType
from mwr.utils.helpers import parse_date, parse_money, parse_quantity
from .base import BaseLoader


logger = logging.getLogger(__name__)


class MerrillLoader(BaseLoader):
    """Loader for Merrill Edge activity CSV exports."""

    required_columns = ("transactiontype",)

    # Checked in order; first keyword found in the description wins
    TYPE_KEYWORDS = [
        (("bought", "buy"), TransactionType.BUY),
        (("sold", "sell"), TransactionType.SELL),
        (("dividend", "div"), TransactionType.DIVIDEND),
        (("deposit", "contribution"), TransactionType.DEPOSIT),
        (("withdrawal", "distribution"), TransactionType.WITHDRAWAL),
        (("interest",), TransactionType.DIVIDEND),
    ]

    def __init__(self, path: Path, current_prices: Optional[dict[str, float]] = None):
        """
        Initialise the Merrill loader.

        Args:
            path: Path to the Merrill export CSV.
            current_prices: Latest price per symbol, used for valuation.
                Symbols not listed get a current price of 0.
        """
        super().__init__(path)
        self.current_prices = current_prices or {}

    def _parse_row(self, row: pd.Series) -> Optional[Transaction]:
        """Parse a Merrill export row into a Transaction."""
        tx_type = self._determine_transaction_type(row)
        if tx_type is None:
            return None

        tx_date = parse_date(row.get("tradedate")) or parse_date(row.get("settlementdate"))
        if not tx_date:
            raise ValueError("no trade or settlement date")

        symbol = row.get("symbol")
        symbol = "" if pd.isna(symbol) else str(symbol).strip()

        shares = abs(parse_quantity(row.get("quantity")))
        price = abs(parse_money(row.get("price")))
        cash_amount = 0.0

        if tx_type in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL):
            cash_amount = abs(parse_money(row.get("amount")))
            shares = 0.0
            price = 0.0
        elif tx_type == TransactionType.DIVIDEND:
            cash_amount = abs(parse_money(row.get("amount")))

        return Transaction(
            date=tx_date,
            transaction_type=tx_type,
            symbol=symbol,
            shares=shares,
            price_per_share=price,
            cash_amount=cash_amount,
            current_price=float(self.current_prices.get(symbol, 0.0)),
        )

    def _determine_transaction_type(self, row: pd.Series) -> Optional[TransactionType]:
        """Map Merrill's free-text transaction type onto a canonical type."""
        raw = row.get("transactiontype")
        if pd.isna(raw) or not str(raw).strip():
            return None

        description = str(raw).lower()
        for keywords, tx_type in self.TYPE_KEYWORDS:
            if any(k in description for k in keywords):
                return tx_type

        logger.warning(f"Skipping unsupported Merrill transaction type: {raw}")
        return None

    def to_canonical_csv(self, output_path: str | Path) -> Path:
        """
        Load the export and write it in the canonical ledger format.

        Args:
            output_path: Destination CSV path.

        Returns:
            The path written.
        """
        output_path = Path(output_path)
        transactions = self.load()
        df = pd.DataFrame(
            [t.to_dict() for t in transactions],
            columns=["Date", "Type", "Symbol", "Shares", "PricePerShare", "CurrentPrice", "CashAmount"],
        )
        df.to_csv(output_path, index=False)
        logger.info(f"Wrote {len(transactions)} canonical transactions to {output_path}")
        return output_path
