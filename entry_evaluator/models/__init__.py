"""Models for entry-evaluator."""

from entry_evaluator.models.artifacts import FileAsset, OutputArtifact, StringAsset
from entry_evaluator.models.base import EvaluatorBaseModel
from entry_evaluator.models.build import BuildStats, ChunkValue, Compilation
from entry_evaluator.models.results import BuildPassResult


__all__ = [
    "BuildPassResult",
    "BuildStats",
    "ChunkValue",
    "Compilation",
    "EvaluatorBaseModel",
    "FileAsset",
    "OutputArtifact",
    "StringAsset",
]
