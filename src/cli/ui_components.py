"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar las mismas líneas en `check` y `validate`.

Se usan `Text` en vez de markup: el NIF viene del usuario y podría contener
corchetes que Rich interpretaría como estilos.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.domain.models import NifReport, RemoteStatus

_STATUS_STYLES: dict[RemoteStatus, str] = {
    RemoteStatus.VALID_KNOWN: "green",
    RemoteStatus.VALID_UNKNOWN: "yellow",
    RemoteStatus.ERROR: "red",
    RemoteStatus.MULTIPLE_RESULTS: "magenta",
    RemoteStatus.UNKNOWN: "dim",
}


def status_line(nif: str, status: RemoteStatus) -> Text:
    return Text.assemble(
        f"NIF {nif} status: ",
        (status.describe(), _STATUS_STYLES[status]),
    )


def local_line(nif: str, valid: bool) -> Text:
    verdict = Text("valid", style="green") if valid else Text("invalid", style="red")
    return Text.assemble(f"NIF {nif} is ", verdict, " (local)")


def print_report(console: Console, report: NifReport) -> None:
    """Imprime el resultado remoto (si hubo consulta) y el local."""

    if report.remote_status is not None:
        console.print(status_line(report.nif, report.remote_status))
    console.print(local_line(report.nif, report.local_valid))
