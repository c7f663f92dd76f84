"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los adaptadores.
- Permite que adaptadores (HTTP/ficheros/entropía) lean config de forma consistente.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para todas las operaciones.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROMISIFY_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="request",
        min_length=1,
        description="User-Agent obligatorio para la API de GitHub.",
    )
    github_api_base_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL de la API de GitHub (sin barra final).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto (DEBUG/INFO/WARNING/ERROR/CRITICAL).",
    )

    @field_validator("github_api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
