"""Configuration models and loading."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

CONFIG_DIR = Path.home() / ".config" / "bff-proxy"
CONFIG_FILE = CONFIG_DIR / "config.json"

# Environment override for the upstream base URL
API_URL_ENV = "API_URL"


class ProxySettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 3000


class UpstreamSettings(BaseModel):
    base_url: str = ""
    timeout: float = 10.0


class LimitSettings(BaseModel):
    max_connections: int = 100
    max_keepalive_connections: int = 20
    keep_alive_timeout: int = 5


class Config(BaseModel):
    proxy: ProxySettings = Field(default_factory=ProxySettings)
    upstream: UpstreamSettings = Field(default_factory=UpstreamSettings)
    limits: LimitSettings = Field(default_factory=LimitSettings)

    @property
    def bff_url(self) -> str:
        """Address clients use to reach this proxy."""
        return f"http://{self.proxy.host}:{self.proxy.port}"


def load_config(config_file: Path = CONFIG_FILE) -> Config:
    """Load configuration from JSON file, creating default if needed.

    ``API_URL`` in the environment takes precedence over ``upstream.base_url``.
    """
    config = _read_config(config_file)
    api_url = os.environ.get(API_URL_ENV)
    if api_url:
        config.upstream.base_url = api_url
    return config


def _read_config(config_file: Path) -> Config:
    if not config_file.exists():
        config_file.parent.mkdir(parents=True, exist_ok=True)
        default = Config()
        config_file.write_text(default.model_dump_json(indent=2))
        return default

    try:
        data = json.loads(config_file.read_text())
        return Config.model_validate(data)
    except (json.JSONDecodeError, ValidationError):
        # Backup corrupted config and recreate default
        backup = config_file.with_suffix(".json.bak")
        config_file.rename(backup)
        default = Config()
        config_file.write_text(default.model_dump_json(indent=2))
        return default
