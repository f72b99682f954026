"""Entry evaluation: resolve, evaluate, diagnose, map assets and assemble."""

from entry_evaluator.evaluation.assembler import (
    ArtifactAssembler,
    create_artifact_assembler,
    run_build_pass,
)
from entry_evaluator.evaluation.context import (
    EvaluationContext,
    GlobalScope,
    create_context,
    evaluate,
)
from entry_evaluator.evaluation.diagnostics import (
    SourceLocation,
    extract_location,
    format_diagnostic,
)
from entry_evaluator.evaluation.public_path import map_assets, primary_output
from entry_evaluator.evaluation.resolver import (
    ArtifactResolver,
    ResolvedEntry,
    create_artifact_resolver,
)


__all__ = [
    "ArtifactAssembler",
    "ArtifactResolver",
    "EvaluationContext",
    "GlobalScope",
    "ResolvedEntry",
    "SourceLocation",
    "create_artifact_assembler",
    "create_artifact_resolver",
    "create_context",
    "evaluate",
    "extract_location",
    "format_diagnostic",
    "map_assets",
    "primary_output",
    "run_build_pass",
]
