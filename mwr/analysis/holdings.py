"""
Current holdings valuation.

Derives open positions from buy and sell transactions and values them at
the latest price recorded in the ledger for each symbol.
"""
import logging
from collections import defaultdict
from datetime import date
from typing import Optional

from mwr.core.models import PortfolioSnapshot, PositionDetail, Transaction, TransactionType


logger = logging.getLogger(__name__)


def build_snapshot(
    transactions: list[Transaction], as_of: Optional[date] = None
) -> PortfolioSnapshot:
    """
    Build a portfolio snapshot from the transaction history.

    Net shares are buys less sells; cost basis is buy value less sell value.
    The current price of a symbol is taken from its most recent trade.
    Trades dated after as_of are ignored. Positions with no remaining
    shares are dropped.

    Args:
        transactions: Full transaction history.
        as_of: Snapshot date. Defaults to today.

    Returns:
        PortfolioSnapshot of open positions.
    """
    if as_of is None:
        as_of = date.today()

    trades = defaultdict(list)
    for tx in transactions:
        if tx.date > as_of:
            continue
        if tx.transaction_type in (TransactionType.BUY, TransactionType.SELL):
            trades[tx.symbol].append(tx)

    positions = {}
    for symbol, symbol_trades in trades.items():
        net_shares = 0.0
        cost_basis = 0.0
        for tx in symbol_trades:
            if tx.transaction_type == TransactionType.BUY:
                net_shares += tx.shares
                cost_basis += tx.total_amount
            else:
                net_shares -= tx.shares
                cost_basis -= tx.total_amount

        if net_shares <= 0:
            logger.debug(f"Skipping closed position: {symbol}")
            continue

        latest = max(symbol_trades, key=lambda t: t.date)
        positions[symbol] = PositionDetail(
            symbol=symbol,
            shares=net_shares,
            current_price=latest.current_price,
            cost_basis=cost_basis,
        )

    snapshot = PortfolioSnapshot(date=as_of, positions=positions)
    logger.info(
        f"Valued {len(positions)} positions at ${snapshot.total_value:,.2f} as of {as_of}"
    )
    return snapshot
