"""Pydantic wire schemas for the Broker view.

These are the stored and transported form: floats keep full precision.
Non-finite floats (inf, nan, "Infinity") are rejected: JSON has no literal
for them, so they could be neither stored nor rendered.
The two-decimal form lives in domain.rendering and is display-only.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.bq_broker.domain.models import (
    UNKNOWN_DOUBLE,
    UNKNOWN_INT,
    UNKNOWN_STRING,
    Broker,
    Portfolio,
    Stock,
)

# ---------------------------------------------------------------------------
# Stock
# ---------------------------------------------------------------------------


class StockSchema(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    symbol: str
    shares: int = 0
    commission: float = 0.0
    price: float = 0.0
    total: float = 0.0
    date: str = ""

    @classmethod
    def from_domain(cls, stock: Stock) -> "StockSchema":
        return cls(
            symbol=stock.symbol,
            shares=stock.shares,
            commission=stock.commission,
            price=stock.price,
            total=stock.total,
            date=stock.date,
        )

    def to_domain(self) -> Stock:
        return Stock(**self.model_dump())


def _stocks_to_domain(stocks: dict[str, StockSchema] | None) -> dict[str, Stock]:
    return {symbol: s.to_domain() for symbol, s in (stocks or {}).items()}


# ---------------------------------------------------------------------------
# Broker
# ---------------------------------------------------------------------------


class BrokerSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    owner: str
    total: float = 0.0
    loyalty: str = UNKNOWN_STRING
    balance: float = UNKNOWN_DOUBLE
    commissions: float = UNKNOWN_DOUBLE
    free: int = UNKNOWN_INT
    sentiment: str = UNKNOWN_STRING
    next_commission: float = Field(UNKNOWN_DOUBLE, alias="nextCommission")
    stocks: dict[str, StockSchema] = Field(default_factory=dict)

    @field_validator("stocks", mode="before")
    @classmethod
    def _null_stocks_is_empty(cls, value: object) -> object:
        return {} if value is None else value

    @classmethod
    def from_domain(cls, broker: Broker) -> "BrokerSchema":
        return cls(
            owner=broker.owner,
            total=broker.total,
            loyalty=broker.loyalty,
            balance=broker.balance,
            commissions=broker.commissions,
            free=broker.free,
            sentiment=broker.sentiment,
            next_commission=broker.next_commission,
            stocks={k: StockSchema.from_domain(v) for k, v in broker.stocks.items()},
        )

    def to_domain(self) -> Broker:
        return Broker(
            owner=self.owner,
            total=self.total,
            loyalty=self.loyalty,
            balance=self.balance,
            commissions=self.commissions,
            free=self.free,
            sentiment=self.sentiment,
            next_commission=self.next_commission,
            stocks=_stocks_to_domain(self.stocks),
        )


class BrokerBody(BaseModel):
    """Request body for create/replace; owner comes from the path."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    owner: str | None = None
    total: float = 0.0
    loyalty: str = UNKNOWN_STRING
    balance: float = UNKNOWN_DOUBLE
    commissions: float = UNKNOWN_DOUBLE
    free: int = UNKNOWN_INT
    sentiment: str = UNKNOWN_STRING
    next_commission: float = Field(UNKNOWN_DOUBLE, alias="nextCommission")
    stocks: dict[str, StockSchema] | None = None

    def to_domain(self, owner: str) -> Broker:
        return BrokerSchema(
            owner=owner,
            **self.model_dump(exclude={"owner"}),
        ).to_domain()


# ---------------------------------------------------------------------------
# Upstream shapes (Portfolio service)
# ---------------------------------------------------------------------------


class PortfolioSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    owner: str
    total: float = 0.0
    loyalty: str = UNKNOWN_STRING
    balance: float = UNKNOWN_DOUBLE
    commissions: float = UNKNOWN_DOUBLE
    free: int = UNKNOWN_INT
    sentiment: str = UNKNOWN_STRING
    next_commission: float = Field(UNKNOWN_DOUBLE, alias="nextCommission")
    account_id: str | None = Field(None, alias="accountID")
    stocks: dict[str, StockSchema] | None = None

    def to_domain(self) -> Portfolio:
        return Portfolio(
            owner=self.owner,
            total=self.total,
            loyalty=self.loyalty,
            balance=self.balance,
            commissions=self.commissions,
            free=self.free,
            sentiment=self.sentiment,
            next_commission=self.next_commission,
            account_id=self.account_id,
            stocks=_stocks_to_domain(self.stocks),
        )
