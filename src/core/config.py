"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/scraping) lean config de forma consistente.

Sin variables de entorno ni `.env`, los defaults consultan https://www.nif.pt
con los headers por defecto del cliente.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="NIF_CHECK_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    lookup_base_url: str = Field(
        default="https://www.nif.pt",
        min_length=8,
        description="Base URL del registro público consultado (sin barra final).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="nif-check/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para la consulta remota.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para diagnósticos (stderr).",
    )

    @field_validator("lookup_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log level: {value!r}")
        return level
