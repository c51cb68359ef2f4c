"""
Core functionality for the MWR calculator.
"""
from .config import CalculatorConfig, Config, load_config
from .exceptions import (
    EmptyLedgerError,
    InsufficientDataError,
    LedgerFormatError,
    MwrError,
)
from .models import (
    AnalysisPeriod,
    CashFlow,
    PerformanceResult,
    PortfolioSnapshot,
    PositionDetail,
    Transaction,
    TransactionType,
)

__all__ = [
    "AnalysisPeriod",
    "CalculatorConfig",
    "CashFlow",
    "Config",
    "EmptyLedgerError",
    "InsufficientDataError",
    "LedgerFormatError",
    "MwrError",
    "PerformanceResult",
    "PortfolioSnapshot",
    "PositionDetail",
    "Transaction",
    "TransactionType",
    "load_config",
]
