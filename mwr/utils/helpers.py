"""
Utility functions for the MWR calculator.

Contains helpers for parsing dates, monetary values, and date arithmetic.
"""
import logging
import re
from datetime import date, datetime
from typing import Optional

import pandas as pd


logger = logging.getLogger(__name__)


def parse_date(
    value: str,
    formats: Optional[list[str]] = None,
) -> Optional[date]:
    """
    Parse a date string into a date object.

    Args:
        value: The date string to parse.
        formats: List of date formats to try. Defaults to common US and ISO formats.

    Returns:
        Parsed date or None if parsing fails.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if value is None or pd.isna(value) or not value:
        return None

    if formats is None:
        formats = [
            "%Y-%m-%d",           # 2023-01-16
            "%m/%d/%Y",           # 01/16/2023
            "%m/%d/%y",           # 01/16/23
            "%Y-%m-%d %H:%M:%S",  # 2023-01-16 15:30:45
            "%d %b %Y",           # 16 Jan 2023
        ]

    value = str(value).strip()

    for fmt in formats:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    logger.warning(f"Could not parse date: {value}")
    return None


def parse_money(value: str | float) -> float:
    """
    Parse a monetary value string into a float.

    Handles currency symbols, commas, parentheses and various formats.

    Args:
        value: The monetary value to parse (e.g., "$1,234.56", "1234.56", "-$500", "(500.00)").

    Returns:
        Parsed float value, or 0.0 if parsing fails.
    """
    if value is None or pd.isna(value):
        return 0.0

    if isinstance(value, (int, float)):
        return float(value)

    value = str(value).strip()

    if value.lower() in ("n/a", "--") or value == "":
        return 0.0

    # Accounting style "(500.00)" is negative
    is_negative = "-" in value or (value.startswith("(") and value.endswith(")"))

    cleaned = re.sub(r"[$£€,\-\s()]", "", value)

    try:
        result = float(cleaned)
        return -result if is_negative else result
    except ValueError:
        logger.warning(f"Could not parse monetary value: {value}")
        return 0.0


def parse_quantity(value: str | float) -> float:
    """
    Parse a quantity/shares value.

    Args:
        value: The quantity to parse.

    Returns:
        Parsed float value, or 0.0 if parsing fails.
    """
    if value is None or pd.isna(value):
        return 0.0

    if isinstance(value, (int, float)):
        return float(value)

    value = str(value).strip()

    if value.lower() == "n/a" or value == "":
        return 0.0

    cleaned = value.replace(",", "")

    try:
        return float(cleaned)
    except ValueError:
        logger.warning(f"Could not parse quantity: {value}")
        return 0.0


def normalise_column_name(name: str) -> str:
    """Lower-case a CSV header and strip spaces and underscores."""
    return str(name).strip().lower().replace(" ", "").replace("_", "")


def subtract_years(value: date, years: int) -> date:
    """
    Move a date back by a number of calendar years.

    February 29 maps to February 28 when the target year is not a leap year.
    """
    try:
        return value.replace(year=value.year - years)
    except ValueError:
        return value.replace(year=value.year - years, day=28)


def calculate_years_between(start: date, end: date, days_per_year: float = 365.25) -> float:
    """
    Calculate the number of years between two dates.

    Args:
        start: Start date.
        end: End date.
        days_per_year: Day-count basis.

    Returns:
        Number of years as a float.
    """
    return (end - start).days / days_per_year
