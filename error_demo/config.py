"""Configuration module: frozen dataclass loaded from environment variables."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    host: str = "0.0.0.0"
    port: int = 8080


def _parse_port(value: str) -> int:
    value = value.strip()
    if not value:
        return Config.port
    port = int(value)
    if not 0 <= port <= 65535:
        raise ValueError(f"PORT out of range: {port}")
    return port


def load_config() -> Config:
    """Build Config from defaults <- env vars. An unset or empty PORT keeps the default."""
    return Config(port=_parse_port(os.environ.get("PORT", "")))
