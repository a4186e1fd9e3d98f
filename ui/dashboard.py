"""Real-time CLI dashboard for proxy monitoring."""

from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Any

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import Config
from ui.log_utils import (
    CLI_LOG_FILE,
    LOG_ROOT,
    RESOURCES,
    resource_name,
    write_cli_log,
    write_incoming_log,
)

console = Console()


class ExchangeInfo:
    """Info about a single proxied exchange."""

    def __init__(self, method: str, endpoint: str, timestamp: datetime):
        self.method = method
        self.endpoint = endpoint
        self.status: int | None = None
        self.timestamp = timestamp


class Dashboard:
    """Real-time dashboard showing proxied traffic per resource."""

    def __init__(self, config: Config, log_root: Path = LOG_ROOT):
        self.config = config
        self._log_root = log_root
        self._log_file = log_root / CLI_LOG_FILE.name
        self._lock = Lock()
        self._exchanges: list[ExchangeInfo] = []
        self._max_exchanges = 10
        self._request_count = {name: 0 for name in (*RESOURCES, "other")}
        self._errors: list[str] = []
        self._live: Live | None = None

    def start(self) -> "Dashboard":
        """Start the live dashboard."""
        self._live = Live(
            self._build_layout(),
            console=console,
            refresh_per_second=4,
            screen=False,
        )
        self._live.start()
        return self

    def stop(self) -> None:
        """Stop the live dashboard."""
        if self._live:
            self._live.stop()

    @property
    def request_count(self) -> dict[str, int]:
        with self._lock:
            return dict(self._request_count)

    def log_request(
        self,
        method: str,
        endpoint: str,
        headers: dict[str, str],
        body: Any = None,
    ) -> None:
        """Log a request about to be forwarded upstream."""
        with self._lock:
            self._request_count[resource_name(endpoint)] += 1
            self._exchanges.insert(0, ExchangeInfo(method, endpoint, datetime.now()))
            self._exchanges = self._exchanges[: self._max_exchanges]

            write_incoming_log(method, endpoint, headers, body, log_root=self._log_root)
            write_cli_log("REQUEST", f"{method} {endpoint}", log_file=self._log_file)

            self._refresh()

    def log_response(self, method: str, endpoint: str, status: int) -> None:
        """Record the upstream status of the most recent matching exchange."""
        with self._lock:
            for info in self._exchanges:
                if info.status is None and (info.method, info.endpoint) == (method, endpoint):
                    info.status = status
                    break
            write_cli_log(
                "RESPONSE", f"{method} {endpoint}", log_file=self._log_file, status=status
            )
            self._refresh()

    def log_error(self, route: str, status: int, message: str) -> None:
        """Log an error."""
        with self._lock:
            truncated = message[:50] + "..." if len(message) > 50 else message
            self._errors.insert(0, f"{route} {status}: {truncated}")
            self._errors = self._errors[:3]
            self._refresh()
            write_cli_log(
                "ERROR", message[:200], log_file=self._log_file, route=route, status=status
            )

    def _refresh(self) -> None:
        """Refresh the display."""
        if self._live:
            self._live.update(self._build_layout())

    def _build_layout(self) -> Layout:
        """Build the dashboard layout."""
        layout = Layout()

        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=5),
        )

        layout["header"].update(self._build_header())
        layout["body"].update(self._build_exchanges_panel())
        layout["footer"].update(self._build_footer())

        return layout

    def _build_header(self) -> Panel:
        """Build header with stats."""
        stats = Text()
        stats.append("BFF Proxy", style="bold cyan")
        for name, count in self._request_count.items():
            stats.append("  |  ")
            stats.append(f"{name}: {count}", style="blue" if name != "other" else "dim")
        stats.append("  |  ")
        stats.append(f"Port: {self.config.proxy.port}", style="dim")

        return Panel(stats, style="cyan")

    def _build_exchanges_panel(self) -> Panel:
        """Build recent exchanges panel."""
        if self._exchanges:
            table = Table(show_header=True, header_style="bold", expand=True, box=None)
            table.add_column("Time", style="dim", width=8)
            table.add_column("Method", width=7)
            table.add_column("Endpoint", ratio=3)
            table.add_column("Status", width=6)

            for info in self._exchanges:
                table.add_row(
                    info.timestamp.strftime("%H:%M:%S"),
                    info.method,
                    _truncate(info.endpoint, 60),
                    _status_text(info.status),
                )

            content = table
        else:
            content = Text("Waiting for requests...", style="dim")

        return Panel(content, title="[blue]Recent Requests[/blue]", border_style="blue")

    def _build_footer(self) -> Panel:
        """Build footer with errors and help."""
        if self._errors:
            error_text = Text()
            for err in self._errors:
                error_text.append("! ", style="red bold")
                error_text.append(err + "\n", style="red")
            content = error_text
        else:
            upstream = self.config.upstream.base_url or "(not set)"
            content = Text(
                f"Forwarding {self.config.bff_url}/api/server/* to {upstream}",
                style="dim",
            )

        return Panel(content, title="[dim]Status[/dim]", border_style="dim")


def _truncate(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def _status_text(status: int | None) -> Text:
    if status is None:
        return Text("...", style="dim")
    if status >= 500:
        return Text(str(status), style="red")
    if status >= 400:
        return Text(str(status), style="yellow")
    return Text(str(status), style="green")
