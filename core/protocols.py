"""Shared protocol definitions."""

from typing import Any, Protocol


class RequestLogger(Protocol):
    """Protocol for request logging (Dashboard)."""

    def log_request(
        self,
        method: str,
        endpoint: str,
        headers: dict[str, str],
        body: Any = None,
    ) -> None: ...
    def log_response(self, method: str, endpoint: str, status: int) -> None: ...
    def log_error(self, route: str, status: int, message: str) -> None: ...
