"""File adapter for abstracting file system operations."""

import json
import logging
from pathlib import Path
from typing import Any

from entry_evaluator.core.errors import FileSystemError, create_file_error
from entry_evaluator.protocols.file_adapter_protocol import FileAdapterProtocol


logger = logging.getLogger(__name__)


class FileSystemAdapter:
    """File system adapter implementation backed by pathlib."""

    def check_exists(self, path: Path) -> bool:
        """Check if a path exists."""
        try:
            return path.exists()
        except (OSError, ValueError):
            # Entry names like "main" or "a\0b" are not valid paths on every OS
            return False

    def is_file(self, path: Path) -> bool:
        """Check if a path is a file."""
        try:
            return path.is_file()
        except (OSError, ValueError):
            return False

    def read_bytes(self, path: Path) -> bytes:
        """Read the full contents of a file as bytes."""
        try:
            logger.debug("Reading file: %s", path)
            content = path.read_bytes()
            logger.debug("Successfully read %d bytes from %s", len(content), path)
            return content
        except FileNotFoundError as e:
            error = create_file_error(path, "read_bytes", e)
            logger.error("File not found: %s", path)
            raise error from e
        except PermissionError as e:
            error = create_file_error(path, "read_bytes", e)
            logger.error("Permission denied reading file: %s", path)
            raise error from e
        except OSError as e:
            error = create_file_error(path, "read_bytes", e)
            logger.error("Error reading file %s: %s", path, e)
            raise error from e

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        try:
            logger.debug("Reading text file: %s", path)
            with path.open(mode="r", encoding=encoding) as f:
                content = f.read()
            logger.debug("Successfully read %d characters from %s", len(content), path)
            return content
        except FileNotFoundError as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("File not found: %s", path)
            raise error from e
        except PermissionError as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("Permission denied reading file: %s", path)
            raise error from e
        except UnicodeDecodeError as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("Encoding error reading file %s: %s", path, e)
            raise error from e
        except OSError as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("Error reading file %s: %s", path, e)
            raise error from e

    def read_json(self, path: Path, encoding: str = "utf-8") -> dict[str, Any]:
        """Read and parse JSON content from a file."""
        try:
            logger.debug("Reading JSON file: %s", path)
            content = self.read_text(path, encoding)
            data = json.loads(content)
            logger.debug("Successfully parsed JSON from %s", path)
        except json.JSONDecodeError as e:
            error = create_file_error(path, "read_json", e, {"encoding": encoding})
            logger.error("Invalid JSON in file %s: %s", path, e)
            raise error from e
        if not isinstance(data, dict):
            raise create_file_error(
                path,
                "read_json",
                ValueError(f"expected a JSON object, got {type(data).__name__}"),
            )
        return data

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        self.write_bytes(path, content.encode(encoding))

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Write bytes to a file, creating parent directories."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug("Writing file: %s", path)
            path.write_bytes(content)
            logger.debug("Successfully wrote %d bytes to %s", len(content), path)
        except PermissionError as e:
            error = create_file_error(
                path, "write_bytes", e, {"content_length": len(content)}
            )
            logger.error("Permission denied writing file: %s", path)
            raise error from e
        except OSError as e:
            error = create_file_error(
                path, "write_bytes", e, {"content_length": len(content)}
            )
            logger.error("Error writing file %s: %s", path, e)
            raise error from e

    def list_files(self, path: Path, pattern: str = "*") -> list[Path]:
        """Recursively list files below a directory matching a pattern."""
        try:
            if not path.is_dir():
                raise NotADirectoryError(f"Not a directory: {path}")
            return sorted(p for p in path.rglob(pattern) if p.is_file())
        except OSError as e:
            error = create_file_error(path, "list_files", e, {"pattern": pattern})
            logger.error("Error listing files in %s: %s", path, e)
            raise error from e


def create_file_adapter() -> FileAdapterProtocol:
    """Create a file adapter with default implementation."""
    return FileSystemAdapter()


__all__ = ["FileSystemAdapter", "FileSystemError", "create_file_adapter"]
