"""
IRR calculators for the MWR calculator.

Solves for the annualised internal rate of return (XIRR) of an irregularly
dated cash-flow series using Newton-Raphson iteration.

    NPV(r) = sum(amount_i / (1 + r) ** years_i) = 0

where years_i is the time from the first cash flow in years.
"""
import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Union

from mwr.core.config import CalculatorConfig
from mwr.core.exceptions import InsufficientDataError
from mwr.core.models import CashFlow
from mwr.utils.helpers import calculate_years_between


logger = logging.getLogger(__name__)

CashFlowInput = Union[CashFlow, tuple[date, float]]

CONVERGED = "converged"
FLAT_DERIVATIVE = "flat_derivative"
MAX_ITERATIONS = "max_iterations"


@dataclass(frozen=True)
class IrrSolution:
    """Outcome of a Newton-Raphson IRR solve."""
    rate: float
    iterations: int
    residual: float  # NPV at the returned rate
    reason: str

    @property
    def converged(self) -> bool:
        return self.reason == CONVERGED


def _as_pairs(cash_flows: Iterable[CashFlowInput]) -> list[tuple[date, float]]:
    """Normalise CashFlow objects and (date, amount) tuples, sorted by date."""
    pairs = []
    for cf in cash_flows:
        if isinstance(cf, CashFlow):
            pairs.append((cf.date, float(cf.amount)))
        else:
            flow_date, amount = cf
            pairs.append((flow_date, float(amount)))
    pairs.sort(key=lambda p: p[0])
    return pairs


def _to_years(
    pairs: list[tuple[date, float]], days_per_year: float
) -> list[tuple[float, float]]:
    first_date = pairs[0][0]
    return [
        (calculate_years_between(first_date, flow_date, days_per_year), amount)
        for flow_date, amount in pairs
    ]


def _npv_and_derivative(flows: list[tuple[float, float]], rate: float) -> tuple[float, float]:
    npv = 0.0
    dnpv = 0.0
    for years, amount in flows:
        # Long spans at the rate bounds leave the float range: treat the
        # discount factor as infinite or zero rather than raising.
        try:
            discount = (1 + rate) ** years
        except OverflowError:
            discount = math.inf
        if discount == 0:
            pv = math.copysign(math.inf, amount) if amount else 0.0
        else:
            pv = amount / discount
        npv += pv
        dnpv -= years * pv / (1 + rate)
    return npv, dnpv


def npv(
    cash_flows: Iterable[CashFlowInput],
    rate: float,
    config: Optional[CalculatorConfig] = None,
) -> float:
    """
    Net present value of a cash-flow series, discounted to its first date.

    Useful for checking the residual of a solved rate.

    Args:
        cash_flows: CashFlow objects or (date, amount) tuples.
        rate: Annual discount rate (0.1 = 10%). Must be greater than -1.

    Returns:
        The NPV, or 0.0 for an empty series.
    """
    if rate <= -1:
        raise ValueError(f"rate must be greater than -1, got {rate}")

    config = config or CalculatorConfig()
    pairs = _as_pairs(cash_flows)
    if not pairs:
        return 0.0

    value, _ = _npv_and_derivative(_to_years(pairs, config.days_per_year), rate)
    return value


def solve_irr_detailed(
    cash_flows: Iterable[CashFlowInput],
    config: Optional[CalculatorConfig] = None,
) -> IrrSolution:
    """
    Solve for the IRR and report how the iteration ended.

    Non-convergence is not an error: when the derivative goes flat or the
    iteration cap is reached, the last rate is returned with the matching
    reason. The rate is always clamped to [min_rate, max_rate].

    Args:
        cash_flows: CashFlow objects or (date, amount) tuples, in any order.
        config: Solver settings. Defaults to CalculatorConfig().

    Returns:
        IrrSolution with the rate, iteration count, residual NPV and reason.

    Raises:
        InsufficientDataError: If fewer than two cash flows are supplied.
    """
    config = config or CalculatorConfig()
    pairs = _as_pairs(cash_flows)

    if len(pairs) < 2:
        raise InsufficientDataError(
            f"At least two cash flows are required to solve for IRR, got {len(pairs)}"
        )

    flows = _to_years(pairs, config.days_per_year)
    rate = config.initial_guess

    for iteration in range(1, config.max_iterations + 1):
        value, derivative = _npv_and_derivative(flows, rate)

        if abs(value) < config.tolerance:
            logger.debug(f"IRR converged to {rate:.6f} after {iteration} iterations")
            return IrrSolution(rate, iteration, value, CONVERGED)

        if abs(derivative) < config.tolerance:
            logger.warning(
                f"IRR derivative is flat at rate {rate:.6f} "
                f"(NPV {value:,.6f}); returning best estimate"
            )
            return IrrSolution(rate, iteration, value, FLAT_DERIVATIVE)

        rate = rate - value / derivative

        # Bound the rate to prevent overflow
        rate = min(max(rate, config.min_rate), config.max_rate)

    residual, _ = _npv_and_derivative(flows, rate)
    logger.warning(
        f"IRR did not converge within {config.max_iterations} iterations; "
        f"returning {rate:.6f} (NPV {residual:,.6f})"
    )
    return IrrSolution(rate, config.max_iterations, residual, MAX_ITERATIONS)


def solve_irr(
    cash_flows: Iterable[CashFlowInput],
    config: Optional[CalculatorConfig] = None,
) -> float:
    """
    Calculate the annualised internal rate of return (XIRR).

    Args:
        cash_flows: CashFlow objects or (date, amount) tuples.
            Negative = money in, positive = money out.
        config: Solver settings. Defaults to CalculatorConfig().

    Returns:
        Annual rate as a fraction (0.1 = 10%).

    Raises:
        InsufficientDataError: If fewer than two cash flows are supplied.
    """
    return solve_irr_detailed(cash_flows, config).rate
