"""Tests for bq_common.errors and bq_common.response."""

from src.bq_common.errors import (
    AppError,
    BrokerNotFoundError,
    InitializationError,
    StoreError,
    UpstreamServiceError,
)
from src.bq_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1, message="x"), Exception)


class TestSpecificErrors:
    def test_broker_not_found(self) -> None:
        err = BrokerNotFoundError("alice")
        assert err.code == 2001
        assert err.http_status == 404
        assert err.owner == "alice"
        assert "alice" in err.message

    def test_upstream_service(self) -> None:
        err = UpstreamServiceError("Portfolio service", 500, "boom")
        assert err.code == 3001
        assert err.http_status == 502
        assert err.status_code == 500
        assert "500" in err.message
        assert "boom" in err.message

    def test_initialization(self) -> None:
        err = InitializationError("connection refused")
        assert err.code == 9003
        assert err.http_status == 503
        assert "connection refused" in err.message

    def test_store(self) -> None:
        err = StoreError("timeout")
        assert err.code == 9004
        assert err.http_status == 503
        assert isinstance(err, AppError)


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response([])
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == []

    def test_error(self) -> None:
        resp = error_response(2001, "Broker not found: bob")
        assert resp.code == 2001
        assert resp.data is None

    def test_serialization(self) -> None:
        d = success_response({"owner": "alice"}).model_dump()
        for key in ("code", "message", "data", "timestamp", "request_id"):
            assert key in d

    def test_request_id_passed_through(self) -> None:
        assert success_response([], "req_abc").request_id == "req_abc"
        assert error_response(2001, "x", "req_def").request_id == "req_def"

    def test_request_id_minted_when_absent(self) -> None:
        assert success_response([]).request_id.startswith("req_")

    def test_typed_payload(self) -> None:
        schema = ApiResponse[list[int]].model_json_schema()
        assert "data" in schema["properties"]
