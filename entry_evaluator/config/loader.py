"""Load render configuration files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from entry_evaluator.config.models import RenderConfig
from entry_evaluator.core.errors import ConfigError
from entry_evaluator.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


def load_render_config(config_path: Path) -> RenderConfig:
    """Load a YAML render configuration.

    Relative paths in the file are resolved against the file's directory.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or does not
            describe a valid render job
    """
    if not config_path.is_file():
        raise ConfigError(
            f"Configuration file not found: {config_path}",
            {"config_path": str(config_path)},
        )

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("config_yaml_invalid", config_path=str(config_path), error=str(e))
        raise ConfigError(
            f"Invalid YAML in {config_path}: {e}", {"config_path": str(config_path)}
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration in {config_path} must be a mapping",
            {"config_path": str(config_path)},
        )

    try:
        config = RenderConfig.model_validate(data)
    except ValidationError as e:
        logger.error("config_invalid", config_path=str(config_path), error=str(e))
        raise ConfigError(
            f"Invalid configuration in {config_path}: {e}",
            {"config_path": str(config_path)},
        ) from e

    logger.debug(
        "config_loaded", config_path=str(config_path), entries=len(config.entries)
    )
    return config.resolve_paths(config_path.parent)


__all__ = ["load_render_config"]
