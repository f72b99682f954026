"""Configuration for entry-evaluator."""

from entry_evaluator.config.loader import load_render_config
from entry_evaluator.config.models import LogFormat, LoggingConfig, RenderConfig
from entry_evaluator.config.settings import EvaluatorSettings, create_settings


__all__ = [
    "EvaluatorSettings",
    "LogFormat",
    "LoggingConfig",
    "RenderConfig",
    "create_settings",
    "load_render_config",
]
