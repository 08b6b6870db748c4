"""Unit tests for bq_broker domain models."""

from src.bq_broker.domain.models import (
    UNKNOWN_DOUBLE,
    UNKNOWN_INT,
    UNKNOWN_STRING,
    Account,
    Broker,
    Portfolio,
    Stock,
)


def _make_account(owner: str = "alice") -> Account:
    return Account(
        id="acct-1",
        owner=owner,
        loyalty="Bronze",
        balance=500.0,
        commissions=9.95,
        free=3,
        sentiment="Neutral",
        next_commission=7.99,
    )


def _make_portfolio(owner: str = "alice") -> Portfolio:
    return Portfolio(
        owner=owner,
        total=1000.0,
        stocks={"IBM": Stock("IBM", 5, 9.99, 200.0, 1000.0, "2024-01-02")},
    )


class TestFromPortfolio:
    def test_with_account(self) -> None:
        broker = Broker.from_portfolio(_make_portfolio(), _make_account())
        assert broker.owner == "alice"
        assert broker.total == 1000.0
        assert broker.loyalty == "Bronze"
        assert broker.balance == 500.0
        assert broker.commissions == 9.95
        assert broker.free == 3
        assert broker.sentiment == "Neutral"
        assert broker.next_commission == 7.99
        assert set(broker.stocks) == {"IBM"}
        assert broker.is_account_known()

    def test_without_account_uses_sentinels(self) -> None:
        broker = Broker.from_portfolio(_make_portfolio())
        assert broker.balance == -1.0
        assert broker.commissions == UNKNOWN_DOUBLE
        assert broker.next_commission == UNKNOWN_DOUBLE
        assert broker.free == -1
        assert broker.loyalty == "Unknown"
        assert broker.sentiment == UNKNOWN_STRING
        assert not broker.is_account_known()

    def test_portfolio_financials_ignored_without_account(self) -> None:
        portfolio = _make_portfolio()
        portfolio.balance = 42.0
        portfolio.loyalty = "Gold"
        broker = Broker.from_portfolio(portfolio)
        assert broker.balance == UNKNOWN_DOUBLE
        assert broker.loyalty == UNKNOWN_STRING

    def test_stocks_are_copied(self) -> None:
        portfolio = _make_portfolio()
        broker = Broker.from_portfolio(portfolio)
        broker.add_stock(Stock("AAPL", 1))
        assert "AAPL" not in portfolio.stocks


class TestAddStock:
    def test_adds_new_symbol(self) -> None:
        broker = Broker(owner="alice")
        broker.add_stock(Stock("IBM", 10, 9.99, 150.0, 1500.0, "2024-01-02"))
        assert broker.stocks["IBM"].shares == 10

    def test_replaces_whole_sub_record(self) -> None:
        broker = Broker(owner="alice")
        broker.add_stock(Stock("IBM", 10, 9.99, 150.0, 1500.0, "2024-01-02"))
        broker.add_stock(Stock("AAPL", 2, 9.99, 100.0, 200.0, "2024-01-02"))
        broker.add_stock(Stock("IBM", 3))

        ibm = broker.stocks["IBM"]
        assert ibm.shares == 3
        assert ibm.price == 0.0
        assert ibm.date == ""
        assert broker.stocks["AAPL"] == Stock("AAPL", 2, 9.99, 100.0, 200.0, "2024-01-02")

    def test_none_is_ignored(self) -> None:
        broker = Broker(owner="alice")
        broker.add_stock(None)
        assert broker.stocks == {}

    def test_missing_symbol_is_ignored(self) -> None:
        broker = Broker(owner="alice")
        broker.add_stock(Stock(""))
        assert broker.stocks == {}


class TestEquality:
    def test_equal_when_rendering_matches(self) -> None:
        a = Broker(owner="alice", total=1000.0, balance=500.0)
        b = Broker(owner="alice", total=1000.001, balance=499.999)
        assert a == b

    def test_not_equal_when_cents_differ(self) -> None:
        a = Broker(owner="alice", total=1000.0)
        b = Broker(owner="alice", total=1000.01)
        assert a != b

    def test_not_equal_to_other_types(self) -> None:
        assert Broker(owner="alice") != "alice"

    def test_stock_insertion_order_irrelevant(self) -> None:
        a = Broker(owner="alice")
        a.add_stock(Stock("IBM", 1))
        a.add_stock(Stock("AAPL", 2))
        b = Broker(owner="alice")
        b.add_stock(Stock("AAPL", 2))
        b.add_stock(Stock("IBM", 1))
        assert a == b

    def test_default_sentinels(self) -> None:
        broker = Broker(owner="bob")
        assert broker.free == UNKNOWN_INT
        assert not broker.is_account_known()
