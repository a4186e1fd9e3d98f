"""Shared request data types."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ProxiedRequest:
    """One inbound call mapped onto one upstream call."""

    method: str
    endpoint: str
    body: Any
    upstream_base_url: str

    @property
    def target_url(self) -> str:
        return self.upstream_base_url.rstrip("/") + self.endpoint

    @property
    def has_body(self) -> bool:
        return self.body is not None
