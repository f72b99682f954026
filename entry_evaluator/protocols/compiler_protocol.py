"""Protocol for host compilers that plugins attach to."""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


DoneCallback = Callable[[BaseException | None], None]


@runtime_checkable
class CompilerProtocol(Protocol):
    """A host build that exposes named lifecycle hooks."""

    def plugin(self, hook: str, callback: Callable[..., Any]) -> None:
        """Register ``callback`` to run when ``hook`` fires."""
        ...
