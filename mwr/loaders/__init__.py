"""
CSV loaders for ledger files.
"""
from .base import BaseLoader
from .csv_loader import CsvLoader
from .merrill import MerrillLoader

__all__ = [
    "BaseLoader",
    "CsvLoader",
    "MerrillLoader",
]
