"""Exportación JSON del resultado.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite guardar evidencia de la consulta sin depender de la salida de consola.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import NifReport


def report_to_json(report: NifReport) -> str:
    """Serializa `NifReport` a JSON con formato estable."""

    payload = report.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def export_report_json(*, report: NifReport, output_path: Path) -> Path:
    """Exporta `NifReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(report_to_json(report) + "\n", encoding="utf-8")
    return output_path
