"""Result model for a single build pass."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, model_validator

from entry_evaluator.core.errors import AssemblyError
from entry_evaluator.core.structlog_logger import get_struct_logger
from entry_evaluator.models.artifacts import OutputArtifact
from entry_evaluator.models.base import EvaluatorBaseModel


logger = get_struct_logger(__name__)


class BuildPassResult(EvaluatorBaseModel):
    """Outcome of one build pass: either an artifact or an assembly error."""

    # Destinations are asset keys and must round-trip unchanged
    model_config = ConfigDict(arbitrary_types_allowed=True, str_strip_whitespace=False)

    success: bool
    destination: str
    artifact: OutputArtifact | None = None
    error: AssemblyError | None = None
    timestamp: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_success_consistency(self) -> "BuildPassResult":
        """Ensure the success flag agrees with the artifact and error fields."""
        if self.success and (self.artifact is None or self.error is not None):
            raise ValueError("A successful build pass needs an artifact and no error")
        if not self.success and self.error is None:
            raise ValueError("A failed build pass must carry its error")
        return self

    @classmethod
    def ok(cls, destination: str, artifact: OutputArtifact) -> "BuildPassResult":
        return cls(success=True, destination=destination, artifact=artifact)

    @classmethod
    def failed(cls, destination: str, error: AssemblyError) -> "BuildPassResult":
        logger.debug("build_pass_result_failed", destination=destination)
        return cls(success=False, destination=destination, error=error)

    def is_success(self) -> bool:
        """Check if the build pass produced an artifact."""
        return self.success and self.artifact is not None

    def unwrap(self) -> OutputArtifact:
        """Return the artifact or raise the captured error."""
        if self.error is not None:
            raise self.error
        if self.artifact is None:
            raise ValueError(f"Build pass for '{self.destination}' has no artifact")
        return self.artifact

    def get_summary(self) -> dict[str, Any]:
        """Get a summary of the result."""
        return {
            "success": self.success,
            "destination": self.destination,
            "timestamp": self.timestamp.isoformat(),
            "size": self.artifact.size() if self.artifact else None,
            "error": str(self.error) if self.error else None,
        }


__all__ = ["BuildPassResult"]
