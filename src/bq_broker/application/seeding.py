"""Seed the Broker view from the Portfolio service.

Stand-in for the event-driven write path when no ingestion pipeline is
configured: fetch the owner's portfolio and store it as a Broker. Account
data is not available from the Portfolio service, so the financial fields
carry the "unknown" sentinels until an account event overwrites the record.
"""

import logging

from src.bq_broker.application.store import BrokerViewStore
from src.bq_broker.domain.models import Broker
from src.bq_broker.infrastructure.portfolio_client import PortfolioClient

logger = logging.getLogger(__name__)


async def seed_from_portfolio(
    store: BrokerViewStore,
    client: PortfolioClient,
    owner: str,
    jwt: str | None = None,
) -> Broker:
    portfolio = await client.get_portfolio(owner, immutable=True, jwt=jwt)
    broker = Broker.from_portfolio(portfolio)
    logger.info("Seeding broker %s from portfolio (%d stocks)", owner, len(broker.stocks))
    return await store.put(owner, broker)
