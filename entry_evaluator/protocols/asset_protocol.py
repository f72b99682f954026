"""Protocol for build assets."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AssetProtocol(Protocol):
    """A build-produced payload exposing content and size accessors."""

    def source(self) -> str | bytes:
        """Return the asset's raw contents."""
        ...

    def size(self) -> int:
        """Return the asset's size in bytes."""
        ...
