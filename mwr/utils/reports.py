"""
Report generation for the MWR calculator.

Turns performance results and portfolio snapshots into tables for the
console and CSV export.
"""
import logging
from pathlib import Path

import pandas as pd

from mwr.core.models import PerformanceResult, PortfolioSnapshot


logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    "Period",
    "Start Date",
    "End Date",
    "MWR %",
    "Total Contributions",
    "Total Withdrawals",
    "Ending Value",
    "Net Gain/Loss",
]


def results_to_dataframe(results: list[PerformanceResult]) -> pd.DataFrame:
    """
    Convert performance results to a DataFrame, one row per period.

    Args:
        results: Results in reporting order.

    Returns:
        DataFrame with RESULT_COLUMNS.
    """
    return pd.DataFrame([r.to_dict() for r in results], columns=RESULT_COLUMNS)


def format_results_table(results: list[PerformanceResult]) -> str:
    """Format performance results as a console table."""
    if not results:
        return "No eligible periods to report."

    lines = [
        "MONEY-WEIGHTED RETURNS (XIRR)",
        "",
        f"{'Period':<10} {'MWR':>8}  {'Net Gain/Loss':>14}  {'Contributions':>14}",
        "-" * 52,
    ]
    for r in results:
        lines.append(
            f"{r.period:<10} {r.money_weighted_return:>7.2f}%  "
            f"{r.net_gain_loss:>14,.2f}  {r.total_contributions:>14,.2f}"
        )
    lines.append("")
    lines.append("Note: Returns are annualised using the XIRR method")
    return "\n".join(lines)


def format_snapshot(snapshot: PortfolioSnapshot, top: int = 5) -> str:
    """
    Format a portfolio snapshot with its largest holdings.

    Args:
        snapshot: Current holdings.
        top: Number of holdings to list, by market value.

    Returns:
        Multi-line summary string.
    """
    lines = [
        "CURRENT PORTFOLIO SUMMARY",
        f"Valuation Date: {snapshot.date.isoformat()}",
        f"Total Value: ${snapshot.total_value:,.2f}",
        f"Positions: {len(snapshot.positions)}",
    ]

    if snapshot.positions:
        lines.append("")
        lines.append("Top Holdings:")
        ranked = sorted(
            snapshot.positions.values(), key=lambda p: p.market_value, reverse=True
        )
        for position in ranked[:top]:
            indicator = "+" if position.unrealised_gain_loss >= 0 else "-"
            lines.append(
                f"  {position.symbol:<6} ${position.market_value:>12,.2f} "
                f"({snapshot.allocation(position.symbol):5.1f}%) "
                f"{indicator} {position.unrealised_gain_loss_pct:6.2f}%"
            )

    return "\n".join(lines)


def export_results_csv(results: list[PerformanceResult], output_path: str | Path) -> Path:
    """
    Write performance results to a CSV file.

    Money and percentages are written with two decimals, dates as ISO strings.

    Args:
        results: Results to export.
        output_path: Destination file.

    Returns:
        The path written.
    """
    output_path = Path(output_path)
    df = results_to_dataframe(results)
    df.to_csv(output_path, index=False, float_format="%.2f")
    logger.info(f"Exported {len(results)} results to {output_path}")
    return output_path
