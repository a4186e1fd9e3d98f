"""HTTP client bound to the proxy mount point."""

import httpx

from core.router import MOUNT_PREFIX

DEFAULT_TIMEOUT = 10.0


def create_api_client(
    bff_url: str,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a client whose relative URLs resolve under ``/api/server``."""
    return httpx.AsyncClient(
        base_url=bff_url.rstrip("/") + MOUNT_PREFIX,
        timeout=timeout,
        headers={"Content-Type": "application/json"},
        transport=transport,
    )
