"""entry-evaluator - prerender build artifacts from evaluated bundle entries."""

from importlib.metadata import version

from .core.errors import (
    AssemblyError,
    EvaluationError,
    EvaluatorError,
    ResolutionError,
    TemplateError,
)
from .evaluation import (
    ArtifactAssembler,
    create_artifact_assembler,
    create_context,
    format_diagnostic,
    map_assets,
    run_build_pass,
)
from .models import BuildPassResult, BuildStats, Compilation, OutputArtifact
from .plugin import EntryEvaluatorPlugin


__version__ = version("entry-evaluator")

__all__ = [
    "ArtifactAssembler",
    "AssemblyError",
    "BuildPassResult",
    "BuildStats",
    "Compilation",
    "EntryEvaluatorPlugin",
    "EvaluationError",
    "EvaluatorError",
    "OutputArtifact",
    "ResolutionError",
    "TemplateError",
    "__version__",
    "create_artifact_assembler",
    "create_context",
    "format_diagnostic",
    "map_assets",
    "run_build_pass",
]

# Import CLI after setting __version__ to avoid circular imports
from .cli import app, main


__all__ += ["app", "main"]
