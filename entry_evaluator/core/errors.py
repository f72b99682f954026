"""Error types for entry-evaluator.

Every error carries a human readable message plus a ``context`` dictionary
with structured details, so callers can log them as structured events.
"""

from pathlib import Path
from typing import Any


class EvaluatorError(Exception):
    """Base class for all entry-evaluator errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        return self.message


class ResolutionError(EvaluatorError):
    """Raised when an entry matches neither a file nor a build asset."""

    def __init__(self, entry: str, context: dict[str, Any] | None = None):
        super().__init__(
            f'Output file not found: "{entry}"', {"entry": entry, **(context or {})}
        )
        self.entry = entry


class EvaluationError(EvaluatorError):
    """Raised when evaluated source code raises.

    The failing entry's label, its source text and the raw exception are all
    kept on the error so callers can render diagnostics.
    """

    def __init__(self, label: str, source: str, original_error: BaseException):
        super().__init__(
            f"Evaluation of '{label}' failed: "
            f"{type(original_error).__name__}: {original_error}",
            {"label": label, "error_type": type(original_error).__name__},
        )
        self.label = label
        self.source = source
        self.original_error = original_error


class TemplateError(EvaluatorError):
    """Raised when a Jinja2 template cannot be loaded or rendered."""


class AssemblyError(EvaluatorError):
    """Raised when a build pass fails; wraps the first underlying failure."""

    def __init__(self, destination: str, original_error: BaseException):
        super().__init__(
            f"Failed to assemble '{destination}': {original_error}",
            {
                "destination": destination,
                "error_type": type(original_error).__name__,
            },
        )
        self.destination = destination
        self.original_error = original_error


class ConfigError(EvaluatorError):
    """Raised when configuration cannot be loaded or is invalid."""


class FileSystemError(EvaluatorError):
    """Raised when a file system operation fails."""


def create_file_error(
    path: Path | str,
    operation: str,
    original_error: Exception,
    context: dict[str, Any] | None = None,
) -> FileSystemError:
    """Create a FileSystemError describing a failed file operation."""
    return FileSystemError(
        f"File operation '{operation}' failed on '{path}': {original_error}",
        {"path": str(path), "operation": operation, **(context or {})},
    )


def create_template_error(
    template: Path | str,
    operation: str,
    original_error: Exception,
    context: dict[str, Any] | None = None,
) -> TemplateError:
    """Create a TemplateError for a failed template operation.

    Template strings are shortened so the message stays readable.
    """
    if isinstance(template, Path):
        name = str(template)
    else:
        name = template if len(template) <= 40 else template[:37] + "..."
    return TemplateError(
        f"Template operation '{operation}' failed on '{name}': {original_error}",
        {"template": name, "operation": operation, **(context or {})},
    )


__all__ = [
    "AssemblyError",
    "ConfigError",
    "EvaluationError",
    "EvaluatorError",
    "FileSystemError",
    "ResolutionError",
    "TemplateError",
    "create_file_error",
    "create_template_error",
]
