"""FastAPI application factory."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from api.handlers import handle_proxy
from core.config import Config
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.router import MOUNT_PREFIX, EndpointResolver
from services.proxy_service import ProxyService
from services.upstream import UpstreamClient

PROXY_METHODS = ["GET", "POST", "PUT", "DELETE"]


def create_app(
    config: Config,
    logger: RequestLogger,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``transport`` replaces the network transport of the upstream client.
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        limits = httpx.Limits(
            max_connections=config.limits.max_connections,
            max_keepalive_connections=config.limits.max_keepalive_connections,
        )
        client = httpx.AsyncClient(
            timeout=config.upstream.timeout,
            limits=limits,
            transport=transport,
        )
        app.state.upstream_client = UpstreamClient(client, HeaderBuilder())
        app.state.proxy_service = ProxyService(
            config=config,
            resolver=EndpointResolver(MOUNT_PREFIX),
        )
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(title="BFF Proxy", version="0.1.0", lifespan=lifespan)

    @app.api_route(MOUNT_PREFIX, methods=PROXY_METHODS)
    @app.api_route(MOUNT_PREFIX + "/{endpoint:path}", methods=PROXY_METHODS)
    async def proxy_server(request: Request):
        return await handle_proxy(request, logger)

    return app
