"""CLI entry point for bff-proxy."""

import asyncio
import sys
from datetime import datetime

import httpx
from rich.console import Console
from rich.markup import escape

from app import create_app
from client.api import create_api_client
from client.models import CreateTodoData
from client.resources import (
    create_todo,
    delete_todo,
    fetch_all_posts,
    fetch_all_todos,
    fetch_all_users,
)
from core.config import API_URL_ENV, CONFIG_FILE, Config, load_config
from ui.dashboard import Dashboard
from ui.log_utils import clear_logs, write_cli_log
from ui.views import posts_table, todos_table, users_table

console = Console()


def main():
    """Main CLI entry point."""
    config = load_config()

    # Handle CLI arguments
    if len(sys.argv) > 1:
        arg = sys.argv[1]

        if arg == "--config":
            console.print(f"[bold]Config:[/bold] {CONFIG_FILE}")
            console.print(f"[bold]Upstream:[/bold] {config.upstream.base_url or '(not set)'}")
            return

        if arg in ("--help", "-h"):
            _print_help()
            return

        if arg in ("posts", "todos", "users"):
            sys.exit(run_command(config, sys.argv[1:]))

        console.print(f"[red][ERROR][/red] Unknown argument: {arg}")
        _print_help()
        sys.exit(2)

    # Requests are answered with 500 until the upstream is configured
    if not config.upstream.base_url:
        console.print("[yellow]Warning:[/yellow] Upstream base URL not configured!")
        console.print(
            f"[dim]Set {API_URL_ENV} or edit {CONFIG_FILE} and set upstream.base_url[/dim]"
        )

    # Clear previous logs and start dashboard
    clear_logs()
    dashboard = Dashboard(config)

    import uvicorn

    app = create_app(config, dashboard)

    # Run with dashboard
    uvicorn_config = uvicorn.Config(
        app,
        host=config.proxy.host,
        port=config.proxy.port,
        log_level="warning",
        timeout_keep_alive=config.limits.keep_alive_timeout,
    )
    server = uvicorn.Server(uvicorn_config)

    dashboard.start()
    start_time = datetime.now()
    write_cli_log("STARTUP", "Proxy started", port=config.proxy.port)
    try:
        server.run()
    finally:
        duration = datetime.now() - start_time
        write_cli_log("SHUTDOWN", "Proxy stopped", duration=str(duration))
        dashboard.stop()


def run_command(
    config: Config,
    args: list[str],
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Run a resource command against a running proxy, return exit code."""
    try:
        asyncio.run(_run_command(config, args, transport))
    except httpx.HTTPStatusError as e:
        console.print(f"[red]Error:[/red] {e.response.status_code} {escape(e.response.text)}")
        return 1
    except httpx.RequestError as e:
        console.print(f"[red]Error:[/red] cannot reach proxy at {config.bff_url}: {escape(str(e))}")
        return 1
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 2
    return 0


async def _run_command(
    config: Config,
    args: list[str],
    transport: httpx.AsyncBaseTransport | None,
) -> None:
    resource, rest = args[0], args[1:]
    async with create_api_client(config.bff_url, transport=transport) as client:
        if resource == "posts":
            console.print(posts_table(await fetch_all_posts(client)))
        elif resource == "users":
            console.print(users_table(await fetch_all_users(client)))
        elif not rest:
            console.print(todos_table(await fetch_all_todos(client)))
        elif rest[0] == "add" and len(rest) > 1:
            text = " ".join(a for a in rest[1:] if a != "--done").strip()
            if not text:
                raise ValueError("todo text is empty")
            todo = await create_todo(
                client, CreateTodoData(todo=text, completed="--done" in rest)
            )
            console.print(f"[green]Created todo {todo.id}:[/green] {escape(todo.todo)}")
        elif rest[0] == "delete" and len(rest) == 2:
            todo = await delete_todo(client, int(rest[1]))
            console.print(f"[green]Deleted todo {todo.id}:[/green] {escape(todo.todo)}")
        else:
            raise ValueError(f"unknown todos command: {' '.join(rest)}")


def _print_help():
    """Print help message."""
    help_text = """
[bold cyan]BFF Proxy[/bold cyan]

Forwards /api/server/* to the upstream REST API configured in API_URL.

[bold]Usage:[/bold]
    bff-proxy                      Start with live dashboard
    bff-proxy --config             Show config location and upstream
    bff-proxy --help               Show this help

[bold]Resources (through a running proxy):[/bold]
    bff-proxy posts                List posts
    bff-proxy users                List users
    bff-proxy todos                List todos
    bff-proxy todos add TEXT       Create a todo (add --done to mark it completed)
    bff-proxy todos delete ID      Delete a todo
"""
    console.print(help_text)


if __name__ == "__main__":
    main()
