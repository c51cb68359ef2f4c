"""
Data models for the MWR calculator.

Contains enums for categorical data and dataclasses for domain objects.
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum, auto


class TransactionType(Enum):
    """Canonical ledger transaction types."""

    BUY = auto()
    SELL = auto()
    DEPOSIT = auto()
    WITHDRAWAL = auto()
    DIVIDEND = auto()

    def __str__(self) -> str:
        return self.name.title()

    @classmethod
    def from_string(cls, value: str) -> "TransactionType":
        """
        Parse a transaction type name, ignoring case and surrounding whitespace.

        Args:
            value: Type name such as "Buy" or "deposit".

        Returns:
            Matching TransactionType.

        Raises:
            ValueError: If the name is not a known transaction type.
        """
        name = str(value).strip().upper()
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown transaction type: {value!r}") from None

    @property
    def is_contribution(self) -> bool:
        """Returns True if this type puts money into the portfolio."""
        return self in (TransactionType.DEPOSIT, TransactionType.BUY)

    @property
    def is_withdrawal(self) -> bool:
        """Returns True if this type takes money out of the portfolio."""
        return self in (
            TransactionType.WITHDRAWAL,
            TransactionType.SELL,
            TransactionType.DIVIDEND,
        )


@dataclass(frozen=True)
class Transaction:
    """
    Represents a single ledger event.

    Trade events (buys and sells) use shares and price_per_share;
    cash events (deposits, withdrawals and dividends) use cash_amount.
    current_price is only used for valuation.
    """

    date: date
    transaction_type: TransactionType
    symbol: str = ""
    shares: float = 0.0
    price_per_share: float = 0.0
    cash_amount: float = 0.0
    current_price: float = 0.0

    @property
    def total_amount(self) -> float:
        """Trade value (shares x price per share)."""
        return self.shares * self.price_per_share

    @property
    def current_value(self) -> float:
        """Value of the traded shares at the current price."""
        return self.shares * self.current_price

    @property
    def cash_flow(self) -> float:
        """
        Signed cash flow used for IRR calculations.

        Negative = money going into the portfolio (deposits, buys)
        Positive = money coming back out (withdrawals, sells, dividends)
        """
        tx_type = self.transaction_type
        if tx_type is TransactionType.DEPOSIT:
            return -self.cash_amount
        if tx_type is TransactionType.WITHDRAWAL:
            return self.cash_amount
        if tx_type is TransactionType.BUY:
            return -self.total_amount
        if tx_type is TransactionType.SELL:
            return self.total_amount
        if tx_type is TransactionType.DIVIDEND:
            return self.cash_amount
        raise ValueError(f"Unhandled transaction type: {tx_type}")

    @property
    def is_contribution(self) -> bool:
        """Returns True for deposits and buys."""
        return self.transaction_type.is_contribution

    @property
    def is_withdrawal(self) -> bool:
        """Returns True for withdrawals, sells and dividends."""
        return self.transaction_type.is_withdrawal

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame creation."""
        return {
            "Date": self.date.isoformat(),
            "Type": str(self.transaction_type),
            "Symbol": self.symbol,
            "Shares": self.shares,
            "PricePerShare": self.price_per_share,
            "CurrentPrice": self.current_price,
            "CashAmount": self.cash_amount,
        }


@dataclass(frozen=True)
class CashFlow:
    """
    A dated cash flow fed to the IRR solver.

    Positive values = money out (withdrawals, ending value)
    Negative values = money in (contributions)
    """

    date: date
    amount: float
    description: str = ""

    @property
    def is_inflow(self) -> bool:
        """Returns True if this is money going into the portfolio."""
        return self.amount < 0

    @property
    def is_outflow(self) -> bool:
        """Returns True if this is money coming back to the investor."""
        return self.amount > 0


@dataclass(frozen=True)
class AnalysisPeriod:
    """A named reporting window. Both endpoints are inclusive."""

    name: str
    start_date: date
    end_date: date

    @property
    def is_valid(self) -> bool:
        return self.start_date <= self.end_date

    def contains(self, value: date) -> bool:
        """Returns True if the date falls within the window."""
        return self.start_date <= value <= self.end_date


@dataclass(frozen=True)
class PerformanceResult:
    """Money-weighted return and cash totals for one analysis period."""

    period: str
    start_date: date
    end_date: date
    money_weighted_return: float  # Annualised, percentage
    total_contributions: float
    total_withdrawals: float
    ending_value: float
    starting_value: float = 0.0  # Historical valuations are not tracked

    @property
    def net_gain_loss(self) -> float:
        """Ending value less starting value and net contributions."""
        return (
            self.ending_value
            - self.starting_value
            - self.total_contributions
            + self.total_withdrawals
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame/report."""
        return {
            "Period": self.period,
            "Start Date": self.start_date.isoformat(),
            "End Date": self.end_date.isoformat(),
            "MWR %": self.money_weighted_return,
            "Total Contributions": self.total_contributions,
            "Total Withdrawals": self.total_withdrawals,
            "Ending Value": self.ending_value,
            "Net Gain/Loss": self.net_gain_loss,
        }

    def __str__(self) -> str:
        """Format the result as a readable string."""
        lines = [
            f"{self.period} ({self.start_date} to {self.end_date})",
            f"  MWR (XIRR):          {self.money_weighted_return:+.2f}%",
            f"  Total Contributions: ${self.total_contributions:,.2f}",
            f"  Total Withdrawals:   ${self.total_withdrawals:,.2f}",
            f"  Ending Value:        ${self.ending_value:,.2f}",
            f"  Net Gain/Loss:       ${self.net_gain_loss:,.2f}",
        ]
        return "\n".join(lines)


@dataclass
class PositionDetail:
    """Represents a current holding derived from the ledger."""

    symbol: str
    shares: float
    current_price: float
    cost_basis: float

    @property
    def market_value(self) -> float:
        return self.shares * self.current_price

    @property
    def unrealised_gain_loss(self) -> float:
        """Unrealised gain/loss in currency terms."""
        return self.market_value - self.cost_basis

    @property
    def unrealised_gain_loss_pct(self) -> float:
        """Unrealised gain/loss as a percentage of cost basis."""
        if self.cost_basis == 0:
            return 0.0
        return (self.unrealised_gain_loss / self.cost_basis) * 100


@dataclass
class PortfolioSnapshot:
    """Current holdings and their total value as of a date."""

    date: date
    positions: dict[str, PositionDetail] = field(default_factory=dict)

    @property
    def total_value(self) -> float:
        return sum(p.market_value for p in self.positions.values())

    def allocation(self, symbol: str) -> float:
        """Share of total value held in a symbol, as a percentage."""
        total = self.total_value
        if total == 0 or symbol not in self.positions:
            return 0.0
        return (self.positions[symbol].market_value / total) * 100
