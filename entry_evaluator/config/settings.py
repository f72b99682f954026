"""Application settings read from the environment."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from entry_evaluator.config.models import LogFormat, LoggingConfig


class EvaluatorSettings(BaseSettings):
    """Settings with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (ENTRY_EVALUATOR_*)
    2. Constructor arguments
    3. .env file
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTRY_EVALUATOR_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override constructor arguments."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    log_level: str = Field(default="WARNING", description="Default log level")
    log_format: LogFormat = Field(default=LogFormat.SIMPLE)
    log_file: Path | None = Field(default=None)
    config_file: Path | None = Field(
        default=None, description="Render configuration used when none is given"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    def logging_config(self, level: str | None = None) -> LoggingConfig:
        """Build a LoggingConfig, optionally overriding the level."""
        return LoggingConfig(
            level=level or self.log_level,
            format=self.log_format,
            file_path=self.log_file,
        )


def create_settings(**overrides: Any) -> EvaluatorSettings:
    """Create settings from the environment plus ``overrides``."""
    return EvaluatorSettings(**overrides)


__all__ = ["EvaluatorSettings", "create_settings"]
