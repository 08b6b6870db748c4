"""Access log for the broker API.

Every request gets a request id (honouring an inbound X-Request-ID from the
gateway, else a fresh one) that is stored on request.state for the response
envelope and echoed back in the X-Request-ID header.

One line per request on the "bq.request" logger; 5xx responses (cache
outages surface as 503) are logged at WARNING so they stand out:
    INFO  GET /api/v1/broker/alice 200 3ms req_a1b2c3d4e5f6
    WARNING GET /api/v1/broker 503 12ms req_0f1e2d3c4b5a
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.bq_common.response import new_request_id

logger = logging.getLogger("bq.request")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request.state.request_id = request_id

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s %d %.0fms %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response
