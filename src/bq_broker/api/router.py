"""bq_broker REST endpoints.

GET  /broker                    — every cached Broker (empty list if none)
GET  /broker/{owner}            — one Broker, 404 if absent
POST /broker/{owner}            — create/replace; seeding and tests only, the
                                  real write path is event ingestion upstream
POST /broker/{owner}/portfolio  — seed from the Portfolio service; the
                                  caller's Authorization header is forwarded
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request

from src.bq_broker.api.dependencies import get_broker_store, get_portfolio_client
from src.bq_broker.application.schemas import BrokerBody, BrokerSchema
from src.bq_broker.application.seeding import seed_from_portfolio
from src.bq_broker.application.store import BrokerViewStore
from src.bq_broker.infrastructure.portfolio_client import PortfolioClient
from src.bq_common.response import ApiResponse, success_response

router = APIRouter(prefix="/broker", tags=["broker"])


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.get("")
async def list_brokers(
    request: Request,
    store: Annotated[BrokerViewStore, Depends(get_broker_store)],
) -> ApiResponse[list[BrokerSchema]]:
    brokers = await store.list_all()
    return success_response(
        [BrokerSchema.from_domain(b) for b in brokers], _request_id(request)
    )


@router.get("/{owner}")
async def get_broker(
    owner: str,
    request: Request,
    store: Annotated[BrokerViewStore, Depends(get_broker_store)],
) -> ApiResponse[BrokerSchema]:
    broker = await store.get(owner)
    return success_response(BrokerSchema.from_domain(broker), _request_id(request))


@router.post("/{owner}")
async def create_broker(
    owner: str,
    body: BrokerBody,
    request: Request,
    store: Annotated[BrokerViewStore, Depends(get_broker_store)],
) -> ApiResponse[BrokerSchema]:
    stored = await store.put(owner, body.to_domain(owner))
    return success_response(BrokerSchema.from_domain(stored), _request_id(request))


@router.post("/{owner}/portfolio")
async def seed_broker_from_portfolio(
    owner: str,
    request: Request,
    store: Annotated[BrokerViewStore, Depends(get_broker_store)],
    client: Annotated[PortfolioClient, Depends(get_portfolio_client)],
    authorization: Annotated[str | None, Header()] = None,
) -> ApiResponse[BrokerSchema]:
    stored = await seed_from_portfolio(store, client, owner, jwt=authorization)
    return success_response(BrokerSchema.from_domain(stored), _request_id(request))
