"""Contrato de consulta de documentos HTML.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El clasificador solo necesita "¿existe este selector?" y "¿qué texto
  contiene?", así que puede probarse con documentos construidos a mano sin
  red ni parser real.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentNode(Protocol):
    """Nodo de solo lectura de un documento ya parseado.

    Reglas de diseño:
    - Un selector que no encuentra nada devuelve `None`, nunca lanza.
    - El documento completo es también un `DocumentNode` (la raíz).
    """

    def select_first(self, selector: str) -> "DocumentNode | None":
        """Primer descendiente que cumple el selector CSS, o `None`."""

        ...

    def text(self) -> str:
        """Texto concatenado del nodo y sus descendientes."""

        ...
