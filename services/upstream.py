"""HTTP proxying utilities for upstream requests."""

from json import JSONDecodeError
from typing import Any

import httpx
from fastapi import Response

from core.exceptions import UpstreamTransportError
from core.headers import HeaderBuilder
from core.request_types import ProxiedRequest


class UpstreamClient:
    """Forward prepared requests to the upstream API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        header_builder: HeaderBuilder | None = None,
    ) -> None:
        self._client = client
        self._headers = header_builder or HeaderBuilder()

    async def forward(self, prepared: ProxiedRequest) -> Response:
        """Send one request upstream and relay its status and body verbatim.

        Any upstream status is a successful round trip. Only transport-level
        failures raise.

        Raises:
            UpstreamTransportError: upstream unreachable, timed out or sent
                a malformed response
        """
        kwargs: dict[str, Any] = {"headers": self._headers.build_upstream_headers()}
        if prepared.has_body:
            kwargs["json"] = prepared.body

        try:
            response = await self._client.request(
                prepared.method,
                prepared.target_url,
                **kwargs,
            )
        except httpx.HTTPStatusError as e:
            # request() does not raise this itself; a status attached to a
            # failure is still reported to the caller
            raise UpstreamTransportError(
                str(e),
                status_code=e.response.status_code,
                payload=_response_payload(e.response),
            ) from e
        except (httpx.RequestError, httpx.InvalidURL, ValueError) as e:
            raise UpstreamTransportError(str(e)) from e

        return Response(
            content=response.content,
            status_code=response.status_code,
            media_type="application/json",
        )


def _response_payload(response: httpx.Response) -> Any:
    """Decode an upstream error body, falling back to raw text."""
    try:
        return response.json()
    except (JSONDecodeError, UnicodeDecodeError):
        return response.text or None
