"""Request preparation for proxied calls."""

from core.config import Config
from core.exceptions import ConfigurationError, RoutingError
from core.request_types import ProxiedRequest
from core.router import EndpointResolver, parse_json_body


class ProxyService:
    """Turn an inbound request into a ProxiedRequest, or refuse it."""

    def __init__(
        self,
        config: Config,
        resolver: EndpointResolver | None = None,
    ) -> None:
        self._config = config
        self._resolver = resolver or EndpointResolver()

    def prepare(
        self,
        method: str,
        raw_path: str,
        query: str = "",
        raw_body: bytes = b"",
    ) -> ProxiedRequest:
        """Validate configuration and build the upstream request.

        Raises:
            ConfigurationError: upstream base URL is not configured
            RoutingError: nothing remains after the mount prefix
        """
        base_url = self._config.upstream.base_url
        if not base_url:
            raise ConfigurationError("API_URL environment variable is not set")

        resolved = self._resolver.resolve(raw_path, query)
        if resolved.is_empty:
            raise RoutingError("Api Not Found")

        return ProxiedRequest(
            method=method.upper(),
            endpoint=resolved.endpoint,
            body=parse_json_body(method, raw_body),
            upstream_base_url=base_url,
        )
