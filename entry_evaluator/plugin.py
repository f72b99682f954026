"""Host lifecycle adapter.

Attaches a build pass to a compiler's ``emit`` hook and reports the outcome
through the host's completion callback.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from entry_evaluator.core.structlog_logger import get_struct_logger
from entry_evaluator.evaluation.assembler import (
    ArtifactAssembler,
    create_artifact_assembler,
    run_build_pass,
)
from entry_evaluator.models.build import Compilation
from entry_evaluator.models.results import BuildPassResult
from entry_evaluator.protocols import CompilerProtocol, DoneCallback, TemplateFunction


logger = get_struct_logger(__name__)

EMIT_HOOK = "emit"


class EntryEvaluatorPlugin:
    """Evaluate entries and emit a templated artifact during ``emit``."""

    def __init__(
        self,
        entries: Sequence[str],
        destination: str,
        scope: Mapping[str, Any] | None,
        template: TemplateFunction,
        assembler: ArtifactAssembler | None = None,
    ) -> None:
        """Initialize the plugin.

        Args:
            entries: Entry file paths or asset/chunk names, evaluated in order
            destination: Name the rendered artifact is emitted under
            scope: Base bindings for the evaluation context
            template: Callable receiving ``{"content", "assets"}``
            assembler: Assembler to use; a default one is created otherwise
        """
        if isinstance(entries, str):
            raise TypeError("entries must be a sequence of entry names, not a string")
        self.entries = tuple(entries)
        self.destination = destination
        self.scope = dict(scope or {})
        self.template = template
        self.assembler = assembler or create_artifact_assembler()

    def apply(self, compiler: CompilerProtocol) -> None:
        """Register the plugin on ``compiler``'s emit hook."""
        compiler.plugin(EMIT_HOOK, self.emit)
        logger.debug("plugin_registered", hook=EMIT_HOOK, destination=self.destination)

    def run(self, compilation: Compilation) -> BuildPassResult:
        """Run one build pass against ``compilation``."""
        return run_build_pass(
            self.entries,
            self.destination,
            self.scope,
            self.template,
            compilation,
            assembler=self.assembler,
        )

    def emit(self, compilation: Compilation, done: DoneCallback) -> None:
        """Emit hook callback; calls ``done`` exactly once."""
        try:
            result = self.run(compilation)
        except Exception as e:
            # Registering the artifact with the host failed
            logger.error(
                "plugin_emit_failed", destination=self.destination, error=str(e)
            )
            done(e)
            return

        if result.error is not None:
            logger.error(
                "plugin_emit_failed",
                destination=self.destination,
                error=str(result.error),
            )
            done(result.error)
            return
        done(None)


__all__ = ["EMIT_HOOK", "EntryEvaluatorPlugin"]
