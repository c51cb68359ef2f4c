"""
Exceptions raised by the MWR calculator.
"""


class MwrError(Exception):
    """Base class for calculator errors."""


class InsufficientDataError(MwrError):
    """Raised when a cash-flow series has fewer than two points."""


class EmptyLedgerError(MwrError):
    """Raised when returns are requested for a ledger with no transactions."""


class LedgerFormatError(MwrError):
    """Raised when a ledger file is missing required columns."""
