"""Shared logging utilities."""

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from uuid import uuid4

LOG_ROOT = Path.cwd() / "logs"
CLI_LOG_FILE = LOG_ROOT / "proxy.log"

RESOURCES = ("posts", "todos", "users")


def resource_name(endpoint: str) -> str:
    """Classify an endpoint by its first path segment.

    Returns:
        One of RESOURCES, or "other"
    """
    path = endpoint.split("?", 1)[0]
    first = path.strip("/").split("/", 1)[0]
    return first if first in RESOURCES else "other"


def write_incoming_log(
    method: str,
    endpoint: str,
    headers: dict[str, str],
    body: Any,
    *,
    log_root: Path = LOG_ROOT,
) -> Path:
    """Write a single incoming request log entry."""
    payload = {
        "timestamp": _utc_now(),
        "method": method,
        "endpoint": endpoint,
        "headers": _redact_headers(headers),
        "body": body,
    }
    return _write_json(log_root / "incoming" / resource_name(endpoint), payload)


def clear_logs(log_root: Path = LOG_ROOT) -> int:
    """Delete request logs left over from a previous run."""
    folder = log_root / "incoming"
    if not folder.exists():
        return 0

    deleted = 0
    for old_file in folder.rglob("*.json"):
        try:
            old_file.unlink()
            deleted += 1
        except OSError:
            pass
    return deleted


def write_cli_log(
    level: str,
    message: str,
    *,
    log_file: Path = CLI_LOG_FILE,
    **extra: Any,
) -> None:
    """Append a line to the rolling CLI log file."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S")
    extra_str = " ".join(f"{k}={v}" for k, v in extra.items()) if extra else ""
    line = f"[{timestamp}] {level}: {message}"
    if extra_str:
        line += f" {extra_str}"
    line += "\n"
    with log_file.open("a") as f:
        f.write(line)


def _write_json(folder: Path, payload: dict[str, Any]) -> Path:
    """Write payload to a unique JSON file in the given folder."""
    folder.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S.%fZ")
    file_path = folder / f"{timestamp}_{uuid4().hex}.json"
    file_path.write_text(json.dumps(payload, indent=2, default=str))
    return file_path


def _redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers."""
    redacted = {}
    for key, value in headers.items():
        lower = key.lower()
        if "key" in lower or "authorization" in lower or lower == "cookie":
            redacted[key] = _mask(value)
        else:
            redacted[key] = value
    return redacted


def _mask(value: str) -> str:
    if len(value) <= 10:
        return "***"
    return value[:6] + "..." + value[-4:]


def _utc_now() -> str:
    return datetime.now(UTC).isoformat()
