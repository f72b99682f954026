"""Assemble a templated artifact from evaluated entries.

One build pass: resolve and evaluate every entry in order inside a single
context, unwrap the exported value, map chunks to public paths, render the
template, and wrap the result as an output artifact.
"""

import sys
from collections.abc import Mapping, Sequence
from typing import Any, TextIO

from entry_evaluator.adapters.file_adapter import create_file_adapter
from entry_evaluator.core.errors import AssemblyError, EvaluationError
from entry_evaluator.core.structlog_logger import StructlogMixin
from entry_evaluator.evaluation.context import create_context
from entry_evaluator.evaluation.diagnostics import extract_location, format_diagnostic
from entry_evaluator.evaluation.public_path import map_assets
from entry_evaluator.evaluation.resolver import ArtifactResolver
from entry_evaluator.models.artifacts import OutputArtifact
from entry_evaluator.models.build import Compilation
from entry_evaluator.models.results import BuildPassResult
from entry_evaluator.protocols import FileAdapterProtocol, TemplateFunction


class ArtifactAssembler(StructlogMixin):
    """Run entries through an evaluation context and template the result."""

    def __init__(
        self,
        file_adapter: FileAdapterProtocol | None = None,
        diagnostic_stream: TextIO | None = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            file_adapter: File operations adapter used to read entries
            diagnostic_stream: Where evaluation diagnostics are written;
                defaults to stderr at the time of the failure
        """
        super().__init__()
        self.file_adapter = file_adapter or create_file_adapter()
        self.diagnostic_stream = diagnostic_stream

    def assemble(
        self,
        entries: Sequence[str],
        destination: str,
        base_scope: Mapping[str, Any] | None,
        template: TemplateFunction,
        compilation: Compilation,
    ) -> OutputArtifact:
        """Build the artifact for ``destination``.

        Raises:
            AssemblyError: Wrapping the first failure (resolution, evaluation
                or the template itself)
        """
        log = self.log_operation("assemble", destination=destination)
        try:
            artifact = self._assemble(
                entries, destination, base_scope, template, compilation
            )
        except Exception as e:
            self.log_error_with_context(
                "assembly_failed", e, destination=destination
            )
            raise AssemblyError(destination, e) from e

        log.info("artifact_assembled", size=artifact.size(), entries=len(entries))
        return artifact

    def _assemble(
        self,
        entries: Sequence[str],
        destination: str,
        base_scope: Mapping[str, Any] | None,
        template: TemplateFunction,
        compilation: Compilation,
    ) -> OutputArtifact:
        if isinstance(entries, str | bytes):
            raise TypeError("entries must be a sequence of entry names, not a string")

        resolver = ArtifactResolver(compilation, file_adapter=self.file_adapter)
        context = create_context(base_scope)

        for entry in entries:
            resolved = resolver.resolve(entry)
            try:
                context.evaluate(resolved.source, entry)
            except EvaluationError as e:
                self._report_evaluation_error(e, resolved.source)
                raise
            self.logger.debug("entry_evaluated", entry=entry, origin=resolved.origin)

        content = context.exported_value()
        assets = map_assets(
            compilation.stats.assets_by_chunk_name, compilation.public_path
        )

        # Template failures propagate as raised; the template is caller code
        rendered = template({"content": content, "assets": assets})
        if not isinstance(rendered, str):
            raise TypeError(
                f"Template must return a string, got {type(rendered).__name__}"
            )
        return OutputArtifact(destination, rendered)

    def _report_evaluation_error(self, error: EvaluationError, source: bytes) -> None:
        diagnostic = format_diagnostic(error, source, error.label)
        location = extract_location(error)
        self.logger.error(
            "entry_evaluation_failed",
            entry=error.label,
            line=location.line if location else None,
            column=location.column if location else None,
            error=str(error.original_error),
            error_type=type(error.original_error).__name__,
        )
        stream = self.diagnostic_stream or sys.stderr
        stream.write(diagnostic + "\n")
        stream.flush()


def create_artifact_assembler(
    file_adapter: FileAdapterProtocol | None = None,
    diagnostic_stream: TextIO | None = None,
) -> ArtifactAssembler:
    """Create an artifact assembler with default dependencies."""
    return ArtifactAssembler(
        file_adapter=file_adapter, diagnostic_stream=diagnostic_stream
    )


def run_build_pass(
    entries: Sequence[str],
    destination: str,
    base_scope: Mapping[str, Any] | None,
    template: TemplateFunction,
    compilation: Compilation,
    assembler: ArtifactAssembler | None = None,
) -> BuildPassResult:
    """Run one build pass and register the artifact on success.

    Assembly failures are returned in the result, never raised, and leave the
    compilation's assets untouched.
    """
    assembler = assembler or create_artifact_assembler()
    try:
        artifact = assembler.assemble(
            entries, destination, base_scope, template, compilation
        )
    except AssemblyError as e:
        return BuildPassResult.failed(destination, e)

    compilation.emit_asset(destination, artifact)
    return BuildPassResult.ok(destination, artifact)


__all__ = [
    "ArtifactAssembler",
    "create_artifact_assembler",
    "run_build_pass",
]
