"""
Cash-flow series construction for IRR calculations.
"""
import logging
from datetime import date

from mwr.core.models import CashFlow, Transaction


logger = logging.getLogger(__name__)


def build_cash_flows(
    transactions: list[Transaction], ending_value: float, end_date: date
) -> list[CashFlow]:
    """
    Build the dated cash-flow series for one period.

    Every transaction with a non-zero cash flow contributes one point.
    The ending portfolio value is appended as a final positive flow on
    end_date, as if everything were sold.

    Args:
        transactions: Transactions in the period.
        ending_value: Portfolio value at end_date.
        end_date: Last day of the period.

    Returns:
        Cash flows sorted by date, ending with the terminal value.
    """
    cash_flows = []

    for tx in transactions:
        amount = tx.cash_flow
        if amount == 0:
            logger.debug(f"Dropping zero cash flow: {tx.transaction_type} {tx.symbol} on {tx.date}")
            continue
        cash_flows.append(
            CashFlow(date=tx.date, amount=amount, description=str(tx.transaction_type))
        )

    cash_flows.sort(key=lambda cf: cf.date)
    cash_flows.append(CashFlow(date=end_date, amount=float(ending_value), description="Ending value"))
    return cash_flows
