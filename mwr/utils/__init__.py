"""
Utility functions for the MWR calculator.
"""
from .calculators import IrrSolution, npv, solve_irr, solve_irr_detailed
from .helpers import (
    calculate_years_between,
    parse_date,
    parse_money,
    parse_quantity,
    subtract_years,
)

__all__ = [
    "IrrSolution",
    "calculate_years_between",
    "npv",
    "parse_date",
    "parse_money",
    "parse_quantity",
    "solve_irr",
    "solve_irr_detailed",
    "subtract_years",
]
