"""ValidationConfig dataclass and loader for declared schemas."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from webfwk.validation.models import SchemaSpec

logger = logging.getLogger(__name__)


@dataclass
class ValidationConfig:
    schemas: dict[str, SchemaSpec] = field(default_factory=dict)
    log_rejections: bool = False


def load_validation_config(path: Path | None = None) -> ValidationConfig:
    """Load the "validation" section of .webfwk.json.

    Schemas that fail to parse are skipped with a warning.
    """
    config = ValidationConfig()
    if path and path.exists():
        try:
            text = path.read_text()
            if text.strip():
                data = json.loads(text)
                if not isinstance(data, dict):
                    logger.warning(
                        f"Ignoring {path}: expected a JSON object, got {type(data).__name__}"
                    )
                    data = {}
                section = data.get("validation", {})
                if isinstance(section, dict):
                    _apply(config, section)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load validation config from {path}: {e}")
    if env_val := os.environ.get("WEBFWK_LOG_REJECTIONS"):
        config.log_rejections = env_val.lower() in ("true", "1", "yes")
    return config


def _apply(cfg: ValidationConfig, data: dict[str, object]) -> None:
    if "log_rejections" in data and isinstance(data["log_rejections"], bool):
        cfg.log_rejections = data["log_rejections"]
    schemas = data.get("schemas", {})
    if not isinstance(schemas, dict):
        return
    for name, rules in schemas.items():
        try:
            cfg.schemas[name] = SchemaSpec.model_validate({"name": name, "rules": rules})
        except ValidationError as e:
            logger.warning(f"Skipping schema '{name}': {e}")
