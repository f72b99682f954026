"""Build asset models.

Every asset exposes ``source()`` and ``size()``, the accessors host builds use
to read payloads and report sizes.
"""

from pathlib import Path


class StringAsset:
    """In-memory asset holding a string or bytes payload."""

    __slots__ = ("_contents",)

    def __init__(self, contents: str | bytes) -> None:
        self._contents = contents

    def source(self) -> str | bytes:
        return self._contents

    def size(self) -> int:
        """Size of the payload in bytes (UTF-8 for strings)."""
        if isinstance(self._contents, bytes):
            return len(self._contents)
        return len(self._contents.encode("utf-8"))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size()})"


class OutputArtifact(StringAsset):
    """Rendered artifact produced by a build pass.

    Immutable once created: the payload is fixed at construction and
    ``destination`` names where the host build registers it.
    """

    __slots__ = ("destination",)

    def __init__(self, destination: str, contents: str) -> None:
        super().__init__(contents)
        self.destination = destination

    def source(self) -> str:
        return str(self._contents)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OutputArtifact):
            return NotImplemented
        return (self.destination, self._contents) == (
            other.destination,
            other._contents,
        )

    def __hash__(self) -> int:
        return hash((self.destination, self._contents))

    def __repr__(self) -> str:
        return f"OutputArtifact(destination={self.destination!r}, size={self.size()})"


class FileAsset:
    """Asset backed by a file on disk, read lazily on each access."""

    __slots__ = ("path",)

    def __init__(self, path: Path) -> None:
        self.path = path

    def source(self) -> bytes:
        return self.path.read_bytes()

    def size(self) -> int:
        return self.path.stat().st_size

    def __repr__(self) -> str:
        return f"FileAsset(path={str(self.path)!r})"


__all__ = ["FileAsset", "OutputArtifact", "StringAsset"]
