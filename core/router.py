"""Endpoint resolution - maps an inbound proxy path onto an upstream endpoint."""

import json
from dataclasses import dataclass
from typing import Any

MOUNT_PREFIX = "/api/server"

# Methods whose body is never read
BODYLESS_METHODS = frozenset({"GET", "HEAD"})


@dataclass(frozen=True)
class ResolvedEndpoint:
    """Path remainder and query string of an inbound request."""

    path: str
    query: str = ""

    @property
    def endpoint(self) -> str:
        if self.query:
            return f"{self.path}?{self.query}"
        return self.path

    @property
    def is_empty(self) -> bool:
        return not self.path


class EndpointResolver:
    """Strip the mount prefix and keep the query string untouched."""

    def __init__(self, prefix: str = MOUNT_PREFIX):
        self.prefix = prefix

    def resolve(self, raw_path: str, query: str = "") -> ResolvedEndpoint:
        """Return the upstream endpoint for an inbound raw path and query."""
        path = raw_path
        if path.startswith(self.prefix):
            path = path[len(self.prefix):]
        return ResolvedEndpoint(path=path, query=query)


def parse_json_body(method: str, raw_body: bytes) -> Any:
    """Parse an inbound body as JSON.

    Bodies of GET/HEAD are ignored. A missing or unparsable body yields None
    and the request is forwarded without one; callers never get a 400 for it.
    """
    if method.upper() in BODYLESS_METHODS or not raw_body:
        return None
    try:
        return json.loads(raw_body, parse_constant=_reject_constant)
    except ValueError:
        # JSONDecodeError, UnicodeDecodeError and rejected constants
        return None


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are not JSON and cannot be re-serialized upstream
    raise ValueError(f"invalid JSON constant: {token}")
