"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Facilita la serialización JSON del resultado de una consulta.

Nota:
- Estos modelos describen *qué* es el resultado, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class RemoteStatus(str, Enum):
    """Resultado cerrado de clasificar la respuesta del registro remoto."""

    VALID_KNOWN = "valid_known"
    VALID_UNKNOWN = "valid_unknown"
    ERROR = "error"
    MULTIPLE_RESULTS = "multiple_results"
    UNKNOWN = "unknown"

    def describe(self) -> str:
        """Frase legible usada por la CLI."""

        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[RemoteStatus, str] = {
    RemoteStatus.VALID_KNOWN: "Valid and known entity.",
    RemoteStatus.VALID_UNKNOWN: "Valid but unknown entity.",
    RemoteStatus.ERROR: "Invalid (Error message).",
    RemoteStatus.MULTIPLE_RESULTS: "Multiple companies found, NIF unavailable.",
    RemoteStatus.UNKNOWN: "Unknown or could not determine.",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NifReport(BaseModel):
    """Resultado agregado de una comprobación (local + remota).

    Por qué existe:
    - Unifica ambas validaciones en una estructura común para la CLI y la
      exportación JSON.
    """

    nif: str = Field(
        ...,
        description="Identificador consultado, tal como lo indicó el usuario.",
    )
    local_valid: bool = Field(
        ...,
        description="Resultado del algoritmo de dígito de control (módulo 11).",
    )
    remote_status: RemoteStatus | None = Field(
        default=None,
        description="Clasificación de la consulta remota (None si se omitió).",
    )
    lookup_url: str | None = Field(
        default=None,
        description="URL consultada en el registro remoto (si aplica).",
    )
    checked_at: datetime = Field(
        default_factory=_utcnow,
        description="Momento de la comprobación (UTC).",
    )
