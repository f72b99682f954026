"""Source excerpts for errors raised by evaluated entries.

Formatting is best effort: when an error carries no usable location the
formatter falls back to the plain error text, and it never raises itself.
"""

import traceback
from dataclasses import dataclass

from entry_evaluator.core.errors import EvaluationError
from entry_evaluator.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

EXCERPT_CONTEXT_LINES = 9


@dataclass(frozen=True)
class SourceLocation:
    """Where an error was raised; ``column`` is a 0-based offset."""

    label: str
    line: int
    column: int = 0


def extract_location(
    error: BaseException,
    label: str | None = None,
    source: str | bytes | None = None,
) -> SourceLocation | None:
    """Find the line and column an error was raised at.

    Syntax errors report their own position. Other errors use the innermost
    traceback frame, restricted to frames from ``label`` when it is given.
    Frame columns are UTF-8 byte offsets; with ``source`` available (given,
    or carried by an EvaluationError) they are converted to characters.
    """
    try:
        if isinstance(error, EvaluationError):
            label = label or error.label
            source = source if source is not None else error.source
            error = error.original_error

        if (
            isinstance(error, SyntaxError)
            and error.lineno
            and (label is None or error.filename == label)
        ):
            column = (error.offset or 1) - 1
            return _location(
                error.filename or label or "<unknown>", error.lineno, column
            )

        frames = [
            frame
            for frame in traceback.extract_tb(error.__traceback__)
            if label is None or frame.filename == label
        ]
        if not frames:
            return None
        frame = frames[-1]
        column = getattr(frame, "colno", None)
        if column and source is not None and frame.lineno:
            column = _character_column(source, frame.lineno, column)
        return _location(frame.filename, frame.lineno, column)
    except Exception as e:
        logger.debug("error_location_unavailable", error=str(e))
        return None


def _location(
    label: str, line: int | None, column: int | None
) -> SourceLocation | None:
    if not line or line < 1:
        return None
    return SourceLocation(label=label, line=line, column=max(column or 0, 0))


def _character_column(source: str | bytes, line: int, byte_column: int) -> int:
    if isinstance(source, bytes):
        source = source.decode("utf-8", errors="replace")
    lines = source.splitlines()
    if not 0 < line <= len(lines):
        return byte_column
    prefix = lines[line - 1].encode("utf-8")[:byte_column]
    return len(prefix.decode("utf-8", errors="ignore"))


def format_error_text(error: BaseException) -> str:
    """Render the exception type and message."""
    try:
        return "".join(traceback.format_exception_only(type(error), error)).rstrip()
    except Exception:
        return type(error).__name__


def format_diagnostic(
    error: BaseException, source: str | bytes, label: str | None = None
) -> str:
    """Render a source excerpt pointing at where ``error`` was raised.

    The excerpt shows ``label:line``, up to nine lines before the failing
    line, the failing line with a caret under the reported column, up to nine
    lines after it, and finally the error text.
    """
    original = error.original_error if isinstance(error, EvaluationError) else error
    try:
        location = extract_location(error, label, source)
        message = format_error_text(original)
        if location is None:
            return message

        if isinstance(source, bytes):
            source = source.decode("utf-8", errors="replace")
        lines = source.splitlines()
        index = location.line - 1

        before = lines[max(0, index - EXCERPT_CONTEXT_LINES) : min(index, len(lines))]
        current = lines[index] if index < len(lines) else ""
        after = lines[index + 1 : index + 1 + EXCERPT_CONTEXT_LINES]
        caret = " " * location.column + "^"

        return "\n".join(
            [
                f"{location.label}:{location.line}",
                *before,
                current,
                caret,
                *after,
                "",
                message,
            ]
        )
    except Exception as e:
        logger.debug("diagnostic_format_failed", error=str(e))
        return format_error_text(original)


__all__ = [
    "EXCERPT_CONTEXT_LINES",
    "SourceLocation",
    "extract_location",
    "format_diagnostic",
    "format_error_text",
]
