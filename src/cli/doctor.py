"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(url)
    except httpx.HTTPError as exc:
        return False, str(exc)
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Show effective settings and check that the lookup endpoint is reachable."""

    settings = AppSettings()

    table = Table(title="nif-check Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Lookup base URL", "OK", settings.lookup_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Log level", "OK", settings.log_level)

    # Connectivity (best-effort)
    ok_http, detail_http = _check_http(settings.lookup_base_url + "/", settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] remote lookups will report 'Unknown' until the endpoint is reachable; "
            "`check --offline` still works."
        )
