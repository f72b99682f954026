"""Configuration models for entry-evaluator."""

import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from entry_evaluator.models.base import EvaluatorBaseModel


class LogFormat(str, Enum):
    """Log output formats."""

    SIMPLE = "simple"
    JSON = "json"


class LoggingConfig(EvaluatorBaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    format: LogFormat = Field(
        default=LogFormat.SIMPLE, description="Console log format"
    )
    file_path: Path | None = Field(
        default=None, description="Optional file receiving JSON log lines"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

    def get_log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        return int(getattr(logging, self.level, logging.WARNING))


class RenderConfig(EvaluatorBaseModel):
    """A render job: which entries to evaluate and where the result goes."""

    model_config = ConfigDict(extra="forbid")

    entries: list[str] = Field(
        min_length=1,
        description="Entry file paths or asset/chunk names, evaluated in order",
    )
    destination: str = Field(
        default="index.html",
        description="Name of the rendered artifact inside the output directory",
    )
    template: Path = Field(description="Jinja2 template file rendering the artifact")
    output_dir: Path = Field(
        default=Path("dist"), description="Bundler output directory"
    )
    stats_file: Path | None = Field(
        default=None, description="Bundler stats JSON with assetsByChunkName"
    )
    public_path: str | None = Field(
        default=None, description="Overrides the stats file's publicPath"
    )
    scope: dict[str, Any] = Field(
        default_factory=dict,
        description="Base bindings available to evaluated entries",
    )

    @field_validator("entries")
    @classmethod
    def validate_entries(cls, v: list[str]) -> list[str]:
        """Reject blank entry names."""
        if any(not entry for entry in v):
            raise ValueError("Entry names must not be empty")
        return v

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Destinations are relative names inside the output directory."""
        if not v or v.startswith("/") or ".." in Path(v).parts:
            raise ValueError("Destination must be a relative path inside output_dir")
        return v

    def resolve_paths(self, base_dir: Path) -> "RenderConfig":
        """Return a copy with relative paths anchored at ``base_dir``."""

        def anchor(path: Path | None) -> Path | None:
            if path is None or path.is_absolute():
                return path
            return base_dir / path

        return self.model_copy(
            update={
                "template": anchor(self.template),
                "output_dir": anchor(self.output_dir),
                "stats_file": anchor(self.stats_file),
            }
        )


__all__ = ["LogFormat", "LoggingConfig", "RenderConfig"]
