"""FastAPI dependencies: get_broker_store, get_portfolio_client.

Both are built once per application in create_app() and kept on app.state;
handlers receive them through Depends instead of module globals.
"""

from fastapi import Request

from src.bq_broker.application.store import BrokerViewStore
from src.bq_broker.infrastructure.portfolio_client import PortfolioClient


def get_broker_store(request: Request) -> BrokerViewStore:
    return request.app.state.broker_store


def get_portfolio_client(request: Request) -> PortfolioClient:
    return request.app.state.portfolio_client
