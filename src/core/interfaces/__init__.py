"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.checker import NifStatusChecker
from core.interfaces.document import DocumentNode

__all__ = ["DocumentNode", "NifStatusChecker"]
