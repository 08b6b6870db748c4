"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.bq_broker.api.router import router as broker_router
from src.bq_broker.application.store import BrokerViewStore
from src.bq_broker.infrastructure.portfolio_client import PortfolioClient
from src.bq_broker.infrastructure.providers import create_cache_provider
from src.bq_common.errors import AppError
from src.bq_common.response import error_response
from src.bq_gateway.middleware.request_log import RequestLogMiddleware

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


def create_app(
    store: BrokerViewStore | None = None,
    portfolio_client: PortfolioClient | None = None,
) -> FastAPI:
    """Build the app around one BrokerViewStore and PortfolioClient (from settings unless given)."""
    if store is None:
        store = BrokerViewStore(
            create_cache_provider(settings),
            cache_name=settings.BROKER_CACHE_NAME,
        )
    if portfolio_client is None:
        portfolio_client = PortfolioClient(
            settings.PORTFOLIO_URL, timeout=settings.PORTFOLIO_TIMEOUT
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: acquire the cache region (fail fast). Shutdown: close provider and client."""
        await store.initialize()
        yield
        await store.close()
        await portfolio_client.aclose()

    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.broker_store = store
    app.state.portfolio_client = portfolio_client

    app.add_middleware(RequestLogMiddleware)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        resp = error_response(
            exc.code, exc.message, getattr(request.state, "request_id", None)
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=resp.model_dump(),
        )

    app.include_router(broker_router, prefix="/api/v1")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": "0.1.0"}

    return app


app = create_app()
