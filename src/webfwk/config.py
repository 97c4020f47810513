"""Server configuration, config file location, and environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8431
CONFIG_FILE_NAME = ".webfwk.json"


def get_config_path() -> Path:
    env = os.environ.get("WEBFWK_CONFIG")
    if env:
        return Path(env)
    return Path.cwd() / CONFIG_FILE_NAME


@dataclass
class Config:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def _read_object(path: Path) -> dict[str, object]:
    """Top-level JSON object of the config file, or {} when unusable."""
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load server config from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring {path}: expected a JSON object, got {type(data).__name__}")
        return {}
    return data


def load_config(path: Path | None = None) -> Config:
    """Build the server config from .webfwk.json, then WEBFWK_HOST / WEBFWK_PORT."""
    config = Config()
    data = _read_object(path) if path and path.exists() else {}

    host = os.environ.get("WEBFWK_HOST") or data.get("host")
    if isinstance(host, str) and host:
        config.host = host

    port = data.get("port")
    if isinstance(port, int) and not isinstance(port, bool):
        config.port = port
    if port_env := os.environ.get("WEBFWK_PORT"):
        try:
            config.port = int(port_env)
        except ValueError:
            logger.warning(f"Ignoring WEBFWK_PORT={port_env!r}: not an integer")

    return config
