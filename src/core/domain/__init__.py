"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) y el algoritmo de
  validación local.
- El dominio no conoce HTTP, CLI, ni HTML: solo conceptos del problema.
"""
