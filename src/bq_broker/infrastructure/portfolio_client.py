"""Async HTTP client for the companion Portfolio service.

Mirrors the Portfolio REST contract:
  GET    /               list portfolios
  POST   /{owner}        create (accountID query param)
  GET    /{owner}        read (immutable query param)
  PUT    /{owner}        buy/sell (symbol, shares, commission query params)
  DELETE /{owner}        delete

The caller's Authorization header is passed through unchanged. No retries:
a non-2xx status or transport fault raises UpstreamServiceError.
"""

import logging
from typing import Any

import httpx

from src.bq_broker.application.schemas import PortfolioSchema
from src.bq_broker.domain.models import Portfolio
from src.bq_common.errors import UpstreamServiceError

logger = logging.getLogger(__name__)

_SERVICE = "Portfolio service"


class PortfolioClient:
    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        jwt: str | None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        headers = {"Accept": "application/json"}
        if jwt:
            headers["Authorization"] = jwt
        url = f"{self._base_url}{path}"
        try:
            resp = await self._client.request(method, url, headers=headers, params=params)
        except httpx.HTTPError as exc:
            logger.warning("%s: %s", type(exc).__name__, exc)
            raise UpstreamServiceError(_SERVICE, 503, str(exc)) from exc
        if resp.status_code >= 400:
            logger.warning("%s %s -> %d", method, url, resp.status_code)
            raise UpstreamServiceError(_SERVICE, resp.status_code, resp.text[:200])
        return resp.json()

    async def get_portfolios(self, jwt: str | None = None) -> list[Portfolio]:
        data = await self._request("GET", "/", jwt)
        return [PortfolioSchema.model_validate(p).to_domain() for p in data or []]

    async def create_portfolio(
        self, owner: str, account_id: str | None = None, jwt: str | None = None
    ) -> Portfolio:
        params = {"accountID": account_id} if account_id else None
        data = await self._request("POST", f"/{owner}", jwt, params)
        return PortfolioSchema.model_validate(data).to_domain()

    async def get_portfolio(
        self, owner: str, immutable: bool = False, jwt: str | None = None
    ) -> Portfolio:
        params = {"immutable": str(immutable).lower()}
        data = await self._request("GET", f"/{owner}", jwt, params)
        return PortfolioSchema.model_validate(data).to_domain()

    async def update_portfolio(
        self,
        owner: str,
        symbol: str,
        shares: int,
        commission: float,
        jwt: str | None = None,
    ) -> Portfolio:
        params = {"symbol": symbol, "shares": shares, "commission": commission}
        data = await self._request("PUT", f"/{owner}", jwt, params)
        return PortfolioSchema.model_validate(data).to_domain()

    async def delete_portfolio(self, owner: str, jwt: str | None = None) -> Portfolio:
        data = await self._request("DELETE", f"/{owner}", jwt)
        return PortfolioSchema.model_validate(data).to_domain()
