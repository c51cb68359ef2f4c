"""
Return analysis package for the MWR calculator.

Provides:
- Period segmentation (YTD, trailing years, all time)
- Cash-flow series construction
- Money-weighted return aggregation per period
- Current holdings valuation
"""

from mwr.analysis.cash_flows import build_cash_flows
from mwr.analysis.holdings import build_snapshot
from mwr.analysis.performance import MwrCalculator, compute_returns
from mwr.analysis.periods import build_periods, eligible_periods, filter_transactions

__all__ = [
    "MwrCalculator",
    "build_cash_flows",
    "build_periods",
    "build_snapshot",
    "compute_returns",
    "eligible_periods",
    "filter_transactions",
]
