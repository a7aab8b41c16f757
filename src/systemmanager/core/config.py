"""Configuración del SDK.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los recursos.
- Permite que el transporte HTTP y el logging lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


CONFIG_DIR_ENV = "SYSTEMMANAGER_CONFIG_DIR"
CONFIG_DIR_NAME = "systemmanager"


def get_user_config_dir() -> Path:
    """Directorio donde el SDK busca el `.env` compartido entre proyectos.

    Reglas:
    - Si `SYSTEMMANAGER_CONFIG_DIR` está definido, se usa tal cual (CI, contenedores).
    - Windows: `%APPDATA%\\systemmanager`.
    - Resto: `$XDG_CONFIG_HOME/systemmanager` o `~/.config/systemmanager`.
    """

    override = (os.environ.get(CONFIG_DIR_ENV) or "").strip()
    if override:
        return Path(override)

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / CONFIG_DIR_NAME

    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / CONFIG_DIR_NAME


def get_user_env_file() -> Path:
    """`.env` de usuario; se lee después del `.env` del directorio actual."""

    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central del SDK.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para el transporte y el logging.
    """

    model_config = SettingsConfigDict(
        env_prefix="SYSTEMMANAGER_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="https://api.docbrasil.com",
        min_length=8,
        description="URL base de la API remota de administración.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="api-systemmanager/0.1",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(?i:debug|info|warning|error|critical)$",
        description="Nivel para el logger `systemmanager` cuando se llama a `configure_logging`.",
    )
