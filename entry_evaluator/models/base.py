"""Base model for all entry-evaluator Pydantic models.

This module provides a base model class that enforces consistent serialization
behavior across all models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class EvaluatorBaseModel(BaseModel):
    """Base model class for all entry-evaluator Pydantic models.

    Serialization is consistent across models:
    - by_alias=True: Use field aliases for serialization
    - exclude_unset=True: Exclude fields that weren't explicitly set
    - mode="json": Use JSON-compatible serialization
    """

    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_assignment=True,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")

    def to_dict_full(self) -> dict[str, Any]:
        """Convert model to dictionary including all fields (even unset ones)."""
        return self.model_dump(by_alias=True, exclude_unset=False, mode="json")
