"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client, parse_target_url
from core.config import AppSettings, get_user_env_file
from core.domain.errors import InvalidURLError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Show the effective configuration and check API connectivity."""

    settings = AppSettings()

    table = Table(title="userfetch doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Log level", "OK", settings.log_level)

    try:
        base_url = str(parse_target_url(settings.api_base_url))
    except InvalidURLError as exc:
        table.add_row("API base URL", "FAIL", f"{settings.api_base_url!r}: {exc.description}")
        _console.print(table)
        raise typer.Exit(code=1)
    table.add_row("API base URL", "OK", base_url)

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)
