"""CLI principal (Typer).

Comandos:
- `check NIF`: validación local + consulta a nif.pt.
- `validate NIF`: solo el algoritmo de dígito de control (sin red).
- `doctor run`: diagnósticos de entorno.

Resultados a stdout; logs y avisos a stderr. Sin argumento, Typer muestra el
uso en stderr y sale con código 2.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from adapters.json_exporter import export_report_json, report_to_json
from adapters.nif_pt import NifPtChecker
from cli import doctor
from cli.logging_setup import configure_logging
from cli.ui_components import local_line, print_report
from core.config import AppSettings
from core.domain.nif import is_nif_valid_local
from core.services.nif_lookup import lookup_nif

app = typer.Typer(
    no_args_is_help=True,
    help="Validate Portuguese tax identification numbers (NIF).",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@app.command()
def check(
    nif: str = typer.Argument(..., help="NIF to check (9 digits)."),
    offline: bool = typer.Option(False, "--offline", help="Skip the nif.pt lookup."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    export_json: Path | None = typer.Option(
        None,
        "--export-json",
        help="Also write the report as JSON to this path.",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Check a NIF locally (checksum) and against nif.pt."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level, _err_console)

    checker = None if offline else NifPtChecker(settings)
    report = lookup_nif(nif, checker=checker, offline=offline)

    if export_json is not None:
        path = export_report_json(report=report, output_path=export_json)
        _err_console.print(f"[green]Saved JSON report to:[/green] {path}")

    if as_json:
        typer.echo(report_to_json(report))
    else:
        print_report(_console, report)


@app.command()
def validate(
    nif: str = typer.Argument(..., help="NIF to validate (9 digits)."),
) -> None:
    """Offline checksum only. Exit code 0 when valid, 1 when invalid."""

    valid = is_nif_valid_local(nif)
    _console.print(local_line(nif, valid))
    raise typer.Exit(code=0 if valid else 1)


def run() -> None:
    app()
