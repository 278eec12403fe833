"""Contrato de comprobadores remotos de NIF.

Por qué Protocol:
- Permite que la orquestación (`core.services.nif_lookup`) no conozca httpx
  ni el sitio consultado, y que los tests inyecten un stub.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import RemoteStatus


@runtime_checkable
class NifStatusChecker(Protocol):
    """Contrato mínimo para una fuente remota.

    Reglas de diseño:
    - `check` es síncrono: una sola petición por invocación.
    - Los fallos de red/formato se degradan a `RemoteStatus.UNKNOWN`.
    """

    def build_url(self, nif: str) -> str:
        """URL que se consultará para `nif`."""

        ...

    def check(self, nif: str) -> RemoteStatus:
        """Consulta la fuente para `nif` y devuelve el estado clasificado."""

        ...
