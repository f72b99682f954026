"""Template adapter for rendering Jinja2 templates into build artifacts."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
)

from entry_evaluator.core.errors import TemplateError, create_template_error
from entry_evaluator.core.structlog_logger import debug_enabled, get_struct_logger
from entry_evaluator.protocols.template_adapter_protocol import (
    TemplateAdapterProtocol,
    TemplateFunction,
)


logger = get_struct_logger(__name__)


class JinjaTemplateAdapter:
    """Jinja2 template adapter implementation."""

    def __init__(self, trim_blocks: bool = True, lstrip_blocks: bool = True):
        """Initialize the Jinja2 template adapter.

        Args:
            trim_blocks: Remove newlines after block tags
            lstrip_blocks: Strip leading whitespace from block tags
        """
        self.trim_blocks = trim_blocks
        self.lstrip_blocks = lstrip_blocks
        self.env = self._create_environment()

    def _create_environment(self, search_path: Path | None = None) -> Environment:
        return Environment(
            loader=FileSystemLoader(search_path) if search_path else None,
            trim_blocks=self.trim_blocks,
            lstrip_blocks=self.lstrip_blocks,
            undefined=StrictUndefined,  # Raise errors for undefined variables
            keep_trailing_newline=True,
        )

    def render_string(self, template_string: str, context: Mapping[str, Any]) -> str:
        """Render a Jinja2 template string with the given context."""
        try:
            return self.env.from_string(template_string).render(dict(context))
        except Exception as e:
            error = create_template_error(
                template_string,
                "render_string",
                e,
                {
                    "context_keys": list(context.keys()),
                    "template_length": len(template_string),
                },
            )
            exc_info = debug_enabled()
            logger.error(
                "template_string_render_error", error=str(e), exc_info=exc_info
            )
            raise error from e

    def render_template_file(
        self, template_path: Path, context: Mapping[str, Any]
    ) -> str:
        """Render a Jinja2 template file with the given context."""
        template = self._load_template(template_path)
        try:
            return template.render(dict(context))
        except Exception as e:
            error = create_template_error(
                template_path,
                "render_template_file",
                e,
                {"context_keys": list(context.keys())},
            )
            exc_info = debug_enabled()
            logger.error(
                "template_render_error",
                template_path=str(template_path),
                error=str(e),
                exc_info=exc_info,
            )
            raise error from e

    def create_template_function(self, template: Path | str) -> TemplateFunction:
        """Build a template callable for the artifact assembler.

        Paths are loaded once up front so a missing or malformed template fails
        before any entry is evaluated. Strings are compiled as template source.
        """
        if isinstance(template, Path):
            compiled = self._load_template(template)
            name = str(template)
        else:
            try:
                compiled = self.env.from_string(template)
            except Exception as e:
                logger.error("template_string_parse_error", error=str(e))
                raise create_template_error(template, "compile", e) from e
            name = "<string>"

        def render(context: Mapping[str, Any]) -> str:
            try:
                return compiled.render(dict(context))
            except Exception as e:
                logger.error("template_render_error", template=name, error=str(e))
                raise create_template_error(
                    name, "render", e, {"context_keys": list(context.keys())}
                ) from e

        render.__name__ = f"render_{Path(name).stem or 'template'}"
        return render

    def validate_template_syntax(self, template_content: str) -> bool:
        """Check that a template string parses."""
        try:
            self.env.parse(template_content)
            logger.debug("template_syntax_validation_successful")
            return True
        except Exception as e:
            logger.warning("template_syntax_validation_failed", error=str(e))
            return False

    def _load_template(self, template_path: Path) -> Template:
        logger.debug("loading_template", template_path=str(template_path))
        env = self._create_environment(template_path.parent)
        try:
            return env.get_template(template_path.name)
        except TemplateNotFound as e:
            logger.error("template_not_found", template_path=str(template_path))
            raise create_template_error(template_path, "load_template", e) from e
        except Exception as e:
            exc_info = debug_enabled()
            logger.error(
                "template_load_error",
                template_path=str(template_path),
                error=str(e),
                exc_info=exc_info,
            )
            raise create_template_error(template_path, "load_template", e) from e


def create_template_adapter(
    trim_blocks: bool = True, lstrip_blocks: bool = True
) -> TemplateAdapterProtocol:
    """Create a template adapter with default implementation."""
    return JinjaTemplateAdapter(trim_blocks=trim_blocks, lstrip_blocks=lstrip_blocks)


__all__ = ["JinjaTemplateAdapter", "TemplateError", "create_template_adapter"]
