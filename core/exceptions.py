"""Custom exception hierarchy for the BFF proxy."""

from typing import Any


class ProxyError(Exception):
    """Base exception for all proxy errors.

    Attributes:
        status_code: HTTP status reported to the caller
    """

    status_code = 500

    def error_body(self) -> dict[str, Any]:
        """Structured body returned to the caller."""
        return {"error": str(self)}


class ConfigurationError(ProxyError):
    """Raised when the upstream base URL is not configured."""


class RoutingError(ProxyError):
    """Raised when no endpoint remains after stripping the mount prefix."""

    status_code = 404


class UpstreamTransportError(ProxyError):
    """Raised when the upstream could not be reached or answered garbage.

    Attributes:
        message: Failure message from the HTTP client
        status_code: Status attached to the failure, 500 when there is none
        payload: Upstream response body attached to the failure (optional)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code or 500
        self.payload = payload

    def error_body(self) -> dict[str, Any]:
        return {"error": self.payload or self.message or "Internal Server Error"}
