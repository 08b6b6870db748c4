"""Domain models for bq_broker — pure dataclasses, no pydantic dependency.

Broker equality is defined on the display rendering (two decimals, half-up):
two records whose currency fields round to the same cents compare equal.
"""

from dataclasses import dataclass, field

UNKNOWN_STRING = "Unknown"
UNKNOWN_DOUBLE = -1.0
UNKNOWN_INT = -1


@dataclass
class Stock:
    symbol: str
    shares: int = 0
    commission: float = 0.0
    price: float = 0.0
    total: float = 0.0
    date: str = ""


@dataclass
class Account:
    """Upstream account data for one owner (read-only here)."""

    id: str
    owner: str
    loyalty: str
    balance: float
    commissions: float
    free: int
    sentiment: str
    next_commission: float


@dataclass
class Portfolio:
    """Upstream portfolio as returned by the Portfolio service."""

    owner: str
    total: float = 0.0
    loyalty: str = UNKNOWN_STRING
    balance: float = UNKNOWN_DOUBLE
    commissions: float = UNKNOWN_DOUBLE
    free: int = UNKNOWN_INT
    sentiment: str = UNKNOWN_STRING
    next_commission: float = UNKNOWN_DOUBLE
    account_id: str | None = None
    stocks: dict[str, Stock] = field(default_factory=dict)


@dataclass(eq=False)
class Broker:
    owner: str
    total: float = 0.0
    loyalty: str = UNKNOWN_STRING
    balance: float = UNKNOWN_DOUBLE
    commissions: float = UNKNOWN_DOUBLE
    free: int = UNKNOWN_INT
    sentiment: str = UNKNOWN_STRING
    next_commission: float = UNKNOWN_DOUBLE
    stocks: dict[str, Stock] = field(default_factory=dict)

    @classmethod
    def from_portfolio(cls, portfolio: Portfolio, account: Account | None = None) -> "Broker":
        """Merge a portfolio with its account; missing account data becomes sentinels."""
        broker = cls(
            owner=portfolio.owner,
            total=portfolio.total,
            stocks=dict(portfolio.stocks),
        )
        if account is not None:
            broker.loyalty = account.loyalty
            broker.balance = account.balance
            broker.commissions = account.commissions
            broker.free = account.free
            broker.sentiment = account.sentiment
            broker.next_commission = account.next_commission
        return broker

    def is_account_known(self) -> bool:
        """False when the financial fields still hold the 'unknown' sentinels."""
        return not (
            self.loyalty == UNKNOWN_STRING
            and self.balance == UNKNOWN_DOUBLE
            and self.free == UNKNOWN_INT
        )

    def add_stock(self, stock: Stock | None) -> None:
        """Insert or fully replace the sub-record for stock.symbol.

        No field-level merge: callers that need one must merge before calling.
        """
        if stock is None or not stock.symbol:
            return
        self.stocks[stock.symbol] = stock

    def render(self) -> str:
        from src.bq_broker.domain.rendering import render_broker

        return render_broker(self)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Broker):
            return NotImplemented
        return self.render() == other.render()

    __hash__ = None  # type: ignore[assignment]
