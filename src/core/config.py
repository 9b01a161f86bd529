"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y servicios lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "userfetch"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "userfetch"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "userfetch"
    return Path.home() / ".config" / "userfetch"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Settings centrales de la aplicación.

    Por qué pydantic-settings:
    - Tipado y validado en el borde (env vars) sin contaminar el Core.
    - Un único contrato de configuración para CLI, adaptadores y servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="USERFETCH_",
        extra="ignore",
        case_sensitive=False,
        # Primero el proyecto (dev), luego la config global del usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.github.com",
        min_length=1,
        description="URL base de la API REST que sirve `/users/<username>`.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="userfetch/0.1 (+https://local)",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de log raíz (DEBUG, INFO, WARNING, ERROR).",
    )
