"""Logging de diagnósticos hacia stderr (Rich)."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str, console: Console) -> None:
    """Instala un `RichHandler` en el logger raíz.

    `console` debe apuntar a stderr: stdout queda reservado para resultados
    (y para `--json`).
    """

    handler = RichHandler(console=console, show_path=False, markup=False)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # httpx/httpcore loguean cada request en INFO/DEBUG; solo interesan en --verbose.
    noisy_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(noisy_level)
