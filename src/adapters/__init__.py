"""Adaptadores de I/O (HTTP, HTML, exportación).

Por qué en adapters:
- Son detalles de infraestructura; el Core solo conoce sus contratos.
"""
