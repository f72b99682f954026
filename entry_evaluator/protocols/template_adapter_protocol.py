"""Protocol for template rendering."""

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


TemplateFunction = Callable[[Mapping[str, Any]], str]


@runtime_checkable
class TemplateAdapterProtocol(Protocol):
    """Protocol for template rendering operations."""

    def render_string(self, template_string: str, context: Mapping[str, Any]) -> str:
        """Render a template string with the given context.

        Raises:
            TemplateError: If the template cannot be rendered
        """
        ...

    def render_template_file(
        self, template_path: Path, context: Mapping[str, Any]
    ) -> str:
        """Render a template file with the given context.

        Raises:
            TemplateError: If the template cannot be loaded or rendered
        """
        ...

    def create_template_function(self, template: Path | str) -> TemplateFunction:
        """Build a callable that renders ``template`` with its argument."""
        ...
