"""
Analysis period segmentation.

Builds the fixed set of reporting windows (YTD, trailing 1-5 years and
all time) for an evaluation date and selects the transactions in each.
"""
import logging
from datetime import date
from typing import Iterator

from mwr.core.exceptions import EmptyLedgerError
from mwr.core.models import AnalysisPeriod, Transaction
from mwr.utils.helpers import subtract_years


logger = logging.getLogger(__name__)

YTD = "YTD"
ALL_TIME = "All Time"
TRAILING_YEARS = (1, 2, 3, 4, 5)


def trailing_period_name(years: int) -> str:
    return "1 Year" if years == 1 else f"{years} Years"


def build_periods(
    transactions: list[Transaction], evaluation_date: date
) -> list[AnalysisPeriod]:
    """
    Build the reporting periods ending on the evaluation date.

    Periods are returned in reporting order: YTD, 1-5 Years, All Time.
    All Time starts at the earliest transaction in the full history.

    Args:
        transactions: Full transaction history.
        evaluation_date: Last day of every period.

    Returns:
        List of AnalysisPeriod objects, before eligibility filtering.

    Raises:
        EmptyLedgerError: If there are no transactions.
    """
    if not transactions:
        raise EmptyLedgerError("Cannot build the All Time period for an empty ledger")

    periods = [AnalysisPeriod(YTD, date(evaluation_date.year, 1, 1), evaluation_date)]
    for years in TRAILING_YEARS:
        periods.append(
            AnalysisPeriod(
                trailing_period_name(years),
                subtract_years(evaluation_date, years),
                evaluation_date,
            )
        )

    first_date = min(t.date for t in transactions)
    periods.append(AnalysisPeriod(ALL_TIME, first_date, evaluation_date))
    return periods


def filter_transactions(
    transactions: list[Transaction], period: AnalysisPeriod
) -> list[Transaction]:
    """Return the transactions inside the period, sorted by date."""
    selected = [t for t in transactions if period.contains(t.date)]
    # sorted() is stable, so same-day entries keep ledger order
    return sorted(selected, key=lambda t: t.date)


def eligible_periods(
    transactions: list[Transaction], evaluation_date: date
) -> Iterator[tuple[AnalysisPeriod, list[Transaction]]]:
    """
    Yield each reportable period with its transactions.

    Periods starting after the evaluation date, or containing no
    transactions, are skipped.

    Raises:
        EmptyLedgerError: If there are no transactions.
    """
    for period in build_periods(transactions, evaluation_date):
        if not period.is_valid:
            logger.debug(f"Skipping {period.name}: starts {period.start_date} after {evaluation_date}")
            continue

        period_transactions = filter_transactions(transactions, period)
        if not period_transactions:
            logger.debug(f"Skipping {period.name}: no transactions since {period.start_date}")
            continue

        yield period, period_transactions
