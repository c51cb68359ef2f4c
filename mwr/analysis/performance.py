"""
Performance analysis: Money-Weighted Return (MWR) per reporting period.

MWR: Internal rate of return accounting for the timing and size of every
cash flow, annualised (XIRR). Each period is solved independently from the
same read-only transaction list:

    periods -> period transactions -> cash flows -> IRR -> PerformanceResult
"""
import logging
from datetime import date
from typing import Optional

from mwr.analysis.cash_flows import build_cash_flows
from mwr.analysis.periods import eligible_periods
from mwr.core.config import CalculatorConfig
from mwr.core.exceptions import InsufficientDataError
from mwr.core.models import AnalysisPeriod, PerformanceResult, Transaction
from mwr.utils.calculators import solve_irr


logger = logging.getLogger(__name__)


def total_contributions(transactions: list[Transaction]) -> float:
    """Sum of deposit and buy amounts, as positive magnitudes."""
    return sum(abs(t.cash_flow) for t in transactions if t.is_contribution)


def total_withdrawals(transactions: list[Transaction]) -> float:
    """Signed sum of withdrawal, sell and dividend cash flows."""
    return sum(t.cash_flow for t in transactions if t.is_withdrawal)


class MwrCalculator:
    """Calculate money-weighted returns for every reporting period."""

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Initialise the calculator.

        Args:
            config: Solver settings. Defaults to CalculatorConfig().
        """
        self.config = config or CalculatorConfig()

    def calculate_period_return(
        self,
        period: AnalysisPeriod,
        transactions: list[Transaction],
        ending_value: float,
    ) -> PerformanceResult:
        """
        Calculate the MWR and cash totals for a single period.

        Raises:
            InsufficientDataError: If the period has no non-zero cash flows.
        """
        cash_flows = build_cash_flows(transactions, ending_value, period.end_date)
        rate = solve_irr(cash_flows, self.config)

        return PerformanceResult(
            period=period.name,
            start_date=period.start_date,
            end_date=period.end_date,
            money_weighted_return=rate * 100,
            total_contributions=total_contributions(transactions),
            total_withdrawals=total_withdrawals(transactions),
            ending_value=float(ending_value),
        )

    def calculate_returns(
        self,
        transactions: list[Transaction],
        ending_value: float,
        evaluation_date: Optional[date] = None,
    ) -> list[PerformanceResult]:
        """
        Calculate results for all eligible periods.

        Args:
            transactions: Full transaction history. Not modified.
            ending_value: Current total portfolio value.
            evaluation_date: End of every period. Defaults to today.

        Returns:
            Results in reporting order (YTD, 1-5 Years, All Time).

        Raises:
            EmptyLedgerError: If there are no transactions.
        """
        if evaluation_date is None:
            evaluation_date = date.today()

        logger.info(
            f"Calculating returns for {len(transactions)} transactions as of "
            f"{evaluation_date}, ending value: ${ending_value:,.2f}"
        )

        results = []
        for period, period_transactions in eligible_periods(transactions, evaluation_date):
            try:
                result = self.calculate_period_return(period, period_transactions, ending_value)
            except InsufficientDataError as e:
                logger.warning(f"Skipping {period.name}: {e}")
                continue

            logger.debug(
                f"{period.name}: MWR {result.money_weighted_return:+.2f}% "
                f"over {len(period_transactions)} transactions"
            )
            results.append(result)

        logger.info(f"Calculated returns for {len(results)} periods")
        return results


def compute_returns(
    transactions: list[Transaction],
    ending_value: float,
    evaluation_date: Optional[date] = None,
    config: Optional[CalculatorConfig] = None,
) -> list[PerformanceResult]:
    """
    Calculate money-weighted returns for every eligible period.

    Convenience wrapper around MwrCalculator.calculate_returns().

    Raises:
        EmptyLedgerError: If there are no transactions.
    """
    return MwrCalculator(config).calculate_returns(transactions, ending_value, evaluation_date)
