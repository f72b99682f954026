"""Core functionality shared across entry-evaluator: errors and logging."""

from entry_evaluator.core.errors import (
    AssemblyError,
    ConfigError,
    EvaluationError,
    EvaluatorError,
    FileSystemError,
    ResolutionError,
    TemplateError,
)


__all__ = [
    "AssemblyError",
    "ConfigError",
    "EvaluationError",
    "EvaluatorError",
    "FileSystemError",
    "ResolutionError",
    "TemplateError",
]
