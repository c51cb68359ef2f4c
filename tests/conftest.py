"""Shared pytest fixtures and configuration."""

from datetime import date

import pytest

from mwr.core.models import Transaction, TransactionType
from tests.fixtures.test_data import (
    CANONICAL_CSV_HEADER,
    CANONICAL_CSV_ROWS,
    MERRILL_CSV_HEADER,
    MERRILL_CSV_ROWS,
    SAMPLE_LEDGER,
    TEST_SYMBOL_1,
    TEST_SYMBOL_2,
)


# ============================================================================
# TRANSACTION FIXTURES
# ============================================================================


@pytest.fixture
def sample_ledger():
    """Deposit, buy and sell ledger used by the end-to-end scenario."""
    return list(SAMPLE_LEDGER)


@pytest.fixture
def mixed_ledger():
    """A multi-year ledger covering every transaction type."""
    return [
        Transaction(date(2019, 3, 1), TransactionType.DEPOSIT, cash_amount=20000.0),
        Transaction(
            date(2019, 3, 4),
            TransactionType.BUY,
            symbol=TEST_SYMBOL_1,
            shares=50.0,
            price_per_share=170.0,
            current_price=190.0,
        ),
        Transaction(
            date(2020, 6, 10),
            TransactionType.BUY,
            symbol=TEST_SYMBOL_2,
            shares=20.0,
            price_per_share=190.0,
            current_price=410.0,
        ),
        Transaction(date(2021, 12, 15), TransactionType.DIVIDEND, symbol=TEST_SYMBOL_2, cash_amount=45.0),
        Transaction(
            date(2022, 9, 1),
            TransactionType.SELL,
            symbol=TEST_SYMBOL_1,
            shares=10.0,
            price_per_share=155.0,
            current_price=190.0,
        ),
        Transaction(date(2023, 5, 5), TransactionType.WITHDRAWAL, cash_amount=1500.0),
        Transaction(date(2024, 2, 20), TransactionType.DEPOSIT, cash_amount=3000.0),
    ]


# ============================================================================
# CSV FIXTURES
# ============================================================================


@pytest.fixture
def canonical_csv_file(tmp_path):
    """Write a canonical ledger CSV and return its path."""
    path = tmp_path / "transactions.csv"
    path.write_text("\n".join([CANONICAL_CSV_HEADER, *CANONICAL_CSV_ROWS]) + "\n")
    return path


@pytest.fixture
def merrill_csv_file(tmp_path):
    """Write a Merrill export CSV and return its path."""
    path = tmp_path / "merrill.csv"
    path.write_text("\n".join([MERRILL_CSV_HEADER, *MERRILL_CSV_ROWS]) + "\n")
    return path


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
