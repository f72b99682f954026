"""Host build snapshot models: bundler stats and the in-progress compilation."""

from collections.abc import Mapping, MutableMapping
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from entry_evaluator.models.base import EvaluatorBaseModel
from entry_evaluator.protocols.asset_protocol import AssetProtocol


ChunkValue = str | list[str]


class BuildStats(EvaluatorBaseModel):
    """Subset of bundler stats the evaluator consumes.

    Field aliases follow the camelCase keys bundlers write to their stats
    JSON, so a stats file can be validated directly.
    """

    # Output names and publicPath are used verbatim
    model_config = ConfigDict(str_strip_whitespace=False)

    assets_by_chunk_name: dict[str, ChunkValue] = Field(
        default_factory=dict,
        alias="assetsByChunkName",
        description="Chunk name to output file, or ordered output files",
    )
    public_path: str = Field(
        default="",
        alias="publicPath",
        description="Public URL prefix configured for the build output",
    )

    @field_validator("assets_by_chunk_name")
    @classmethod
    def validate_chunk_values(
        cls, v: dict[str, ChunkValue]
    ) -> dict[str, ChunkValue]:
        """Reject chunks that report no output files."""
        for chunk, value in v.items():
            if isinstance(value, list) and not value:
                raise ValueError(f"Chunk '{chunk}' has no output files")
        return v


class Compilation:
    """The in-progress build the evaluator reads from and emits into.

    ``assets`` is shared with the host: assets emitted here become part of the
    host build's output set.
    """

    def __init__(
        self,
        assets: MutableMapping[str, AssetProtocol] | None = None,
        stats: BuildStats | Mapping[str, Any] | None = None,
        public_path: str | None = None,
    ) -> None:
        self.assets: MutableMapping[str, AssetProtocol] = (
            assets if assets is not None else {}
        )
        if stats is None:
            self.stats = BuildStats()
        elif isinstance(stats, BuildStats):
            self.stats = stats
        else:
            self.stats = BuildStats.model_validate(stats)
        self.public_path = (
            public_path if public_path is not None else self.stats.public_path
        )

    def get_asset(self, name: str) -> AssetProtocol | None:
        return self.assets.get(name)

    def emit_asset(self, name: str, asset: AssetProtocol) -> None:
        self.assets[name] = asset

    def get_stats(self) -> BuildStats:
        return self.stats

    def __repr__(self) -> str:
        return (
            f"Compilation(assets={len(self.assets)}, "
            f"chunks={len(self.stats.assets_by_chunk_name)}, "
            f"public_path={self.public_path!r})"
        )


__all__ = ["BuildStats", "ChunkValue", "Compilation"]
