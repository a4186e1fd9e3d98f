"""FastAPI route handlers."""

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from core.exceptions import ProxyError
from core.protocols import RequestLogger


def _raw_path(request: Request) -> str:
    """Inbound path as sent on the wire, without percent-decoding."""
    raw = request.scope.get("raw_path")
    if raw:
        return raw.split(b"?", 1)[0].decode("latin-1")
    return request.url.path


def _raw_query(request: Request) -> str:
    return request.scope.get("query_string", b"").decode("latin-1")


async def handle_proxy(request: Request, logger: RequestLogger) -> Response:
    """Handle /api/server/* by forwarding it to the upstream API."""
    method = request.method
    path = _raw_path(request)
    query = _raw_query(request)

    raw_body = b""
    if method not in ("GET", "HEAD"):
        raw_body = await request.body()

    proxy_service = request.app.state.proxy_service
    upstream = request.app.state.upstream_client

    try:
        prepared = proxy_service.prepare(method, path, query, raw_body)
        logger.log_request(
            prepared.method,
            prepared.endpoint,
            dict(request.headers),
            prepared.body,
        )
        response = await upstream.forward(prepared)
    except ProxyError as e:
        logger.log_error(f"{method} {path}", e.status_code, str(e))
        return JSONResponse(e.error_body(), status_code=e.status_code)

    logger.log_response(prepared.method, prepared.endpoint, response.status_code)
    return response
