"""Unit tests for mwr/analysis/performance.py return aggregation."""

from datetime import date

import pytest
from scipy.optimize import brentq

from mwr.analysis.performance import (
    MwrCalculator,
    compute_returns,
    total_contributions,
    total_withdrawals,
)
from mwr.core.config import CalculatorConfig
from mwr.core.exceptions import EmptyLedgerError, InsufficientDataError
from mwr.core.models import Transaction, TransactionType
from mwr.utils.calculators import npv
from tests.fixtures.test_data import TEST_EVALUATION_DATE


class TestCashTotals:
    """Test contribution and withdrawal totals."""

    def test_total_contributions(self, sample_ledger):
        """Test deposits and buys are summed as magnitudes."""
        assert total_contributions(sample_ledger) == pytest.approx(11000.0)

    def test_total_withdrawals(self, mixed_ledger):
        """Test withdrawals, sells and dividends are summed."""
        assert total_withdrawals(mixed_ledger) == pytest.approx(45.0 + 1550.0 + 1500.0)

    def test_totals_empty(self):
        assert total_contributions([]) == 0
        assert total_withdrawals([]) == 0


class TestComputeReturnsEndToEnd:
    """Test the deposit, buy and sell scenario."""

    def test_all_periods_reported_in_order(self, sample_ledger):
        results = compute_returns(sample_ledger, 0.0, TEST_EVALUATION_DATE)

        assert [r.period for r in results] == [
            "YTD",
            "1 Year",
            "2 Years",
            "3 Years",
            "4 Years",
            "5 Years",
            "All Time",
        ]

    def test_all_time_matches_newton_fixed_point(self, sample_ledger):
        """Test All Time MWR is the root of the period's NPV."""
        results = compute_returns(sample_ledger, 0.0, TEST_EVALUATION_DATE)
        all_time = results[-1]

        flows = [
            (date(2023, 1, 1), -10000.0),
            (date(2023, 1, 2), -1000.0),
            (date(2024, 1, 2), 1500.0),
            (date(2024, 1, 2), 0.0),
        ]
        expected = brentq(lambda r: npv(flows, r), -0.99, 10.0) * 100

        assert all_time.start_date == date(2023, 1, 1)
        assert all_time.end_date == TEST_EVALUATION_DATE
        assert all_time.money_weighted_return == pytest.approx(expected, abs=1e-4)
        assert -99.0 <= all_time.money_weighted_return <= 1000.0

    def test_all_time_totals(self, sample_ledger):
        all_time = compute_returns(sample_ledger, 0.0, TEST_EVALUATION_DATE)[-1]

        assert all_time.total_contributions == pytest.approx(11000.0)
        assert all_time.total_withdrawals == pytest.approx(1500.0)
        assert all_time.starting_value == 0.0
        assert all_time.ending_value == 0.0
        assert all_time.net_gain_loss == pytest.approx(-9500.0)

    def test_one_year_period(self, sample_ledger):
        """Test the 1 Year period excludes the earlier deposit."""
        one_year = compute_returns(sample_ledger, 0.0, TEST_EVALUATION_DATE)[1]

        assert one_year.start_date == date(2023, 1, 2)
        assert one_year.total_contributions == pytest.approx(1000.0)
        assert one_year.money_weighted_return == pytest.approx(
            (1.5 ** (365.25 / 365) - 1) * 100, abs=1e-3
        )

    def test_ytd_with_single_day_flows_is_best_effort(self, sample_ledger):
        """Test flows on one date return the initial guess rather than failing."""
        ytd = compute_returns(sample_ledger, 0.0, TEST_EVALUATION_DATE)[0]

        assert ytd.start_date == date(2024, 1, 1)
        assert ytd.money_weighted_return == pytest.approx(10.0)

    def test_idempotent(self, sample_ledger):
        """Test identical inputs give identical results."""
        original = list(sample_ledger)

        first = compute_returns(sample_ledger, 1234.56, TEST_EVALUATION_DATE)
        second = compute_returns(sample_ledger, 1234.56, TEST_EVALUATION_DATE)

        assert first == second
        assert sample_ledger == original


class TestComputeReturnsEligibility:
    """Test skipped periods and errors."""

    def test_single_old_transaction(self):
        """Test a deposit six years back is only reported under All Time."""
        transactions = [Transaction(date(2018, 6, 15), TransactionType.DEPOSIT, cash_amount=1000.0)]

        results = compute_returns(transactions, 2000.0, date(2024, 6, 15))

        assert [r.period for r in results] == ["All Time"]
        assert results[0].money_weighted_return == pytest.approx(
            (2 ** (365.25 / 2192) - 1) * 100, abs=1e-3
        )

    def test_empty_ledger_raises_error(self):
        with pytest.raises(EmptyLedgerError):
            compute_returns([], 1000.0, TEST_EVALUATION_DATE)

    def test_period_without_cash_flows_is_skipped(self):
        """Test a period holding only zero-value records is skipped, not fatal."""
        transactions = [
            Transaction(date(2022, 3, 1), TransactionType.DEPOSIT, cash_amount=5000.0),
            Transaction(date(2024, 2, 1), TransactionType.BUY, symbol="AAPL"),
        ]

        results = compute_returns(transactions, 5500.0, date(2024, 6, 15))
        names = [r.period for r in results]

        assert "YTD" not in names
        assert "1 Year" not in names
        assert names == ["3 Years", "4 Years", "5 Years", "All Time"]

    def test_insufficient_data_does_not_abort_batch(self, mocker, sample_ledger):
        """Test a failing period is skipped while the rest are reported."""
        mocker.patch(
            "mwr.analysis.performance.solve_irr",
            side_effect=[InsufficientDataError("no flows")] + [0.05] * 6,
        )

        results = compute_returns(sample_ledger, 0.0, TEST_EVALUATION_DATE)

        assert [r.period for r in results][0] == "1 Year"
        assert len(results) == 6
        assert all(r.money_weighted_return == pytest.approx(5.0) for r in results)

    def test_solver_called_once_per_period(self, mocker, mixed_ledger):
        spy = mocker.spy(MwrCalculator, "calculate_period_return")

        results = compute_returns(mixed_ledger, 30000.0, date(2024, 6, 15))

        assert spy.call_count == len(results)


class TestMwrCalculator:
    """Test the calculator class entry point."""

    def test_default_evaluation_date_is_today(self, mocker, sample_ledger):
        mock_date = mocker.patch("mwr.analysis.performance.date")
        mock_date.today.return_value = TEST_EVALUATION_DATE

        results = MwrCalculator().calculate_returns(sample_ledger, 0.0)

        assert results[-1].end_date == TEST_EVALUATION_DATE

    def test_uses_calculator_config(self):
        """Test the configured rate cap applies to every period."""
        transactions = [
            Transaction(date(2024, 1, 2), TransactionType.DEPOSIT, cash_amount=100.0),
        ]
        calculator = MwrCalculator(CalculatorConfig(max_rate=5.0))

        results = calculator.calculate_returns(transactions, 1_000_000.0, date(2024, 6, 15))

        assert all(r.money_weighted_return == pytest.approx(500.0) for r in results)

    def test_mixed_ledger_results(self, mixed_ledger):
        results = MwrCalculator().calculate_returns(mixed_ledger, 30000.0, date(2024, 6, 15))

        assert [r.period for r in results] == [
            "YTD",
            "1 Year",
            "2 Years",
            "3 Years",
            "4 Years",
            "5 Years",
            "All Time",
        ]
        assert all(-99.0 <= r.money_weighted_return <= 1000.0 for r in results)
        assert results[-1].total_contributions == pytest.approx(20000.0 + 8500.0 + 3800.0 + 3000.0)
