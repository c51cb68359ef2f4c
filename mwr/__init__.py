"""
MWR Calculator

Calculates money-weighted (XIRR) returns for an investment portfolio
from a transaction ledger and its current value.

Example usage:
    from datetime import date
    from pathlib import Path

    from mwr import CsvLoader, build_snapshot, compute_returns

    transactions = CsvLoader(Path("data/transactions.csv")).load()
    snapshot = build_snapshot(transactions)

    for result in compute_returns(transactions, snapshot.total_value):
        print(result)
"""

from mwr.analysis import (
    MwrCalculator,
    build_cash_flows,
    build_periods,
    build_snapshot,
    compute_returns,
)
from mwr.core import (
    AnalysisPeriod,
    CalculatorConfig,
    CashFlow,
    Config,
    EmptyLedgerError,
    InsufficientDataError,
    LedgerFormatError,
    MwrError,
    PerformanceResult,
    PortfolioSnapshot,
    PositionDetail,
    Transaction,
    TransactionType,
    load_config,
)
from mwr.loaders import BaseLoader, CsvLoader, MerrillLoader
from mwr.utils import IrrSolution, npv, solve_irr, solve_irr_detailed


__version__ = "0.1.0"

__all__ = [
    # Models
    "AnalysisPeriod",
    "CashFlow",
    "PerformanceResult",
    "PortfolioSnapshot",
    "PositionDetail",
    "Transaction",
    "TransactionType",
    # Errors
    "EmptyLedgerError",
    "InsufficientDataError",
    "LedgerFormatError",
    "MwrError",
    # Engine
    "IrrSolution",
    "MwrCalculator",
    "build_cash_flows",
    "build_periods",
    "build_snapshot",
    "compute_returns",
    "npv",
    "solve_irr",
    "solve_irr_detailed",
    # Loaders
    "BaseLoader",
    "CsvLoader",
    "MerrillLoader",
    # Config
    "CalculatorConfig",
    "Config",
    "load_config",
]
