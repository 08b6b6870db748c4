"""Response envelope shared by every broker endpoint.

    {"code": 0, "message": "success", "data": <payload>, "timestamp": "...", "request_id": "req_..."}

ApiResponse is generic in its payload so routes can declare
ApiResponse[BrokerSchema] / ApiResponse[list[BrokerSchema]] and the OpenAPI
schema shows the Broker shape. Errors carry a non-zero code and data=null.
The request id is the one RequestLogMiddleware put on request.state, so log
lines and response bodies correlate; a fresh one is minted when absent.
"""

import uuid
from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class ApiResponse(BaseModel, Generic[DataT]):
    code: int = 0
    message: str = "success"
    data: DataT | None = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    request_id: str = Field(default_factory=new_request_id)


def success_response(data: DataT, request_id: str | None = None) -> ApiResponse[DataT]:
    return ApiResponse(data=data, request_id=request_id or new_request_id())


def error_response(code: int, message: str, request_id: str | None = None) -> ApiResponse[None]:
    return ApiResponse(
        code=code,
        message=message,
        data=None,
        request_id=request_id or new_request_id(),
    )
