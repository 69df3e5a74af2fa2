from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - SQLITE_DB_PATH: path to the sqlite db file. Default './todos.db'
    - HOST: bind address for the HTTP listener. Default '0.0.0.0'
    - PORT: bind port for the HTTP listener. Default 3000
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: logging level name. Default 'INFO'
    """

    sqlite_db_path: str = "./todos.db"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 < port < 65536):
        return default
    return port


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    defaults = Settings()
    origins = _parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")) or ["*"]

    return Settings(
        sqlite_db_path=_get_env("SQLITE_DB_PATH", defaults.sqlite_db_path).strip(),
        host=_get_env("HOST", defaults.host).strip(),
        port=_parse_port(_get_env("PORT", str(defaults.port)), defaults.port),
        cors_allow_origins=origins,
        log_level=_get_env("LOG_LEVEL", defaults.log_level).strip().upper(),
    )
