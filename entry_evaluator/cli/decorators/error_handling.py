"""Error handling decorators for CLI commands."""

import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from entry_evaluator.core.errors import (
    AssemblyError,
    ConfigError,
    EvaluationError,
    EvaluatorError,
    FileSystemError,
    TemplateError,
)
from entry_evaluator.core.structlog_logger import debug_enabled, get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    Known errors are logged as structured events and turned into exit code 1.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except AssemblyError as e:
            cause = e.original_error
            if isinstance(cause, EvaluationError):
                # The source excerpt has already been written to stderr
                logger.error("evaluation_error", entry=cause.label, error=str(cause))
            else:
                logger.error(
                    "assembly_error",
                    destination=e.destination,
                    error=str(cause),
                    error_type=type(cause).__name__,
                )
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except ConfigError as e:
            logger.error("configuration_error", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except TemplateError as e:
            logger.error("template_error", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except FileSystemError as e:
            logger.error("file_system_error", error=str(e), **e.context)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except EvaluatorError as e:
            logger.error("evaluator_error", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except typer.Exit:
            raise
        except Exception as e:
            logger.error("unexpected_error", error=str(e), exc_info=debug_enabled())
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-vv", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
