"""Unified error codes and custom exceptions.

Error code ranges:
  2xxx: Broker view
  3xxx: Upstream services
  9xxx: System / cache provider
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 2xxx: Broker view ---

class BrokerNotFoundError(AppError):
    def __init__(self, owner: str) -> None:
        super().__init__(2001, f"Broker not found: {owner}", 404)
        self.owner = owner


# --- 3xxx: Upstream services ---

class UpstreamServiceError(AppError):
    def __init__(self, service: str, status_code: int, detail: str = "") -> None:
        message = f"{service} returned HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(3001, message, 502)
        self.status_code = status_code


# --- 9xxx: System ---

class InitializationError(AppError):
    """Cache provider unreachable or misconfigured while acquiring a region."""

    def __init__(self, detail: str) -> None:
        super().__init__(9003, f"Cache initialization failed: {detail}", 503)


class StoreError(AppError):
    """Any other provider-level fault: connectivity, timeout, undecodable payload."""

    def __init__(self, detail: str) -> None:
        super().__init__(9004, f"Cache store error: {detail}", 503)
