"""Configuration module: frozen dataclass from an optional YAML file plus environment variables."""

import os
from dataclasses import dataclass

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value) -> bool:
    return str(value).strip().lower() in ("true", "1", "yes", "on")


@dataclass(frozen=True)
class Config:
    host: str = "0.0.0.0"
    port: int = 5514
    buffer_size: int = 1024
    max_rejects: int = 100
    hex_dump: bool = False
    log_level: str = "INFO"
    dashboard_enabled: bool = True
    dashboard_port: int = 8080


def load_yaml(path: str) -> dict:
    """Return the ``server`` section of the YAML file at *path*, or an empty dict."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return data.get("server", {}) or {}


def load_config(path: str | None = None) -> Config:
    """Build Config from a YAML file (if any) overlaid by environment variables."""
    path = os.environ.get("CONFIG_PATH", path)
    base = load_yaml(path) if path else {}

    def _get(env: str, key: str):
        return os.environ.get(env, base.get(key, getattr(Config, key)))

    log_level = str(_get("LOG_LEVEL", "log_level")).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Config(
        host=str(_get("SERVER_HOST", "host")),
        port=int(_get("SERVER_PORT", "port")),
        buffer_size=int(_get("BUFFER_SIZE", "buffer_size")),
        max_rejects=int(_get("MAX_REJECTS", "max_rejects")),
        hex_dump=_parse_bool(_get("HEX_DUMP", "hex_dump")),
        log_level=log_level,
        dashboard_enabled=_parse_bool(_get("DASHBOARD_ENABLED", "dashboard_enabled")),
        dashboard_port=int(_get("DASHBOARD_PORT", "dashboard_port")),
    )
