"""Shared fixtures: fixed configuration, recording logger, fake upstream."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from core.config import Config, UpstreamSettings

UPSTREAM_URL = "https://dummy.example"


class RecordingLogger:
    """RequestLogger that keeps every call in memory."""

    def __init__(self) -> None:
        self.requests: list[tuple[str, str, Any]] = []
        self.responses: list[tuple[str, str, int]] = []
        self.errors: list[tuple[str, int, str]] = []

    def log_request(self, method, endpoint, headers, body=None):
        self.requests.append((method, endpoint, body))

    def log_response(self, method, endpoint, status):
        self.responses.append((method, endpoint, status))

    def log_error(self, route, status, message):
        self.errors.append((route, status, message))


class FakeUpstream:
    """MockTransport wrapper that records outbound requests."""

    def __init__(self) -> None:
        self.calls: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={}
        )

    def respond(self, status: int, content: bytes | None = None, **kwargs: Any) -> None:
        self.handler = lambda request: httpx.Response(status, content=content, **kwargs)

    def fail(self, exc_factory: Callable[[httpx.Request], Exception]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc_factory(request)

        self.handler = handler

    def transport(self) -> httpx.MockTransport:
        def handle(request: httpx.Request) -> httpx.Response:
            self.calls.append(request)
            return self.handler(request)

        return httpx.MockTransport(handle)


@pytest.fixture
def config() -> Config:
    return Config(upstream=UpstreamSettings(base_url=UPSTREAM_URL))


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def make_client(logger: RecordingLogger, upstream: FakeUpstream):
    """Build a TestClient around an app with the given config."""
    clients: list[TestClient] = []

    def factory(cfg: Config) -> TestClient:
        client = TestClient(create_app(cfg, logger, transport=upstream.transport()))
        client.__enter__()
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, config: Config) -> TestClient:
    return make_client(config)
