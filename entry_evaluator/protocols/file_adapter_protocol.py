"""Protocol for file system operations used by the evaluator."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileAdapterProtocol(Protocol):
    """Protocol for file system operations."""

    def check_exists(self, path: Path) -> bool:
        """Check if a path exists and is a regular file or directory.

        Args:
            path: Path to check

        Returns:
            True if path exists, False otherwise
        """
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a file."""
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Read the full contents of a file.

        Args:
            path: Path to the file to read

        Returns:
            File content as bytes

        Raises:
            FileSystemError: If file cannot be read
        """
        ...

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file.

        Raises:
            FileSystemError: If file cannot be read
        """
        ...

    def read_json(self, path: Path, encoding: str = "utf-8") -> dict[str, object]:
        """Read and parse JSON content from a file.

        Raises:
            FileSystemError: If file cannot be read or JSON is invalid
        """
        ...

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file, creating parent directories.

        Raises:
            FileSystemError: If file cannot be written
        """
        ...

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Write bytes to a file, creating parent directories.

        Raises:
            FileSystemError: If file cannot be written
        """
        ...

    def list_files(self, path: Path, pattern: str = "*") -> list[Path]:
        """Recursively list files below a directory matching a pattern.

        Raises:
            FileSystemError: If directory cannot be accessed
        """
        ...
