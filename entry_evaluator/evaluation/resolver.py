"""Resolve entries to source, from disk or from the in-progress build."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from entry_evaluator.adapters.file_adapter import create_file_adapter
from entry_evaluator.core.errors import ResolutionError
from entry_evaluator.core.structlog_logger import get_struct_logger
from entry_evaluator.evaluation.public_path import primary_output
from entry_evaluator.models.build import Compilation
from entry_evaluator.protocols import AssetProtocol, FileAdapterProtocol


logger = get_struct_logger(__name__)

# Asset bundles are expressions; wrapping assigns their value to module.exports.
# The opening parenthesis stays on the bundle's first line so line numbers in
# diagnostics match the asset itself.
EXPORTS_ASSIGNMENT_PREFIX = b"module.exports = ("
EXPORTS_ASSIGNMENT_SUFFIX = b"\n)\n"

EntryOrigin = Literal["file", "asset"]


@dataclass(frozen=True)
class ResolvedEntry:
    """Source resolved for one entry."""

    entry: str
    source: bytes
    origin: EntryOrigin
    asset_name: str | None = None

    @property
    def text(self) -> str:
        return self.source.decode("utf-8", errors="replace")


def wrap_exports_assignment(contents: str | bytes) -> bytes:
    """Turn an expression-producing bundle into an assignment to module.exports."""
    raw = contents.encode("utf-8") if isinstance(contents, str) else contents
    return EXPORTS_ASSIGNMENT_PREFIX + raw + EXPORTS_ASSIGNMENT_SUFFIX


class ArtifactResolver:
    """Resolve entry identifiers against the file system and a compilation."""

    def __init__(
        self,
        compilation: Compilation,
        file_adapter: FileAdapterProtocol | None = None,
    ) -> None:
        self.compilation = compilation
        self.file_adapter = file_adapter or create_file_adapter()

    def resolve(self, entry: str) -> ResolvedEntry:
        """Resolve ``entry`` to source bytes.

        Existing files are returned verbatim. Anything else is looked up as a
        build asset and wrapped as an exports assignment.

        Raises:
            ResolutionError: If the entry is neither a file nor a known asset
        """
        path = Path(entry)
        if self.file_adapter.check_exists(path) and self.file_adapter.is_file(path):
            logger.debug("entry_resolved_from_file", entry=entry)
            return ResolvedEntry(
                entry=entry,
                source=self.file_adapter.read_bytes(path),
                origin="file",
            )

        found = self.find_asset(entry)
        if found is None:
            logger.error("entry_not_found", entry=entry)
            raise ResolutionError(entry)

        asset_name, asset = found
        logger.debug("entry_resolved_from_asset", entry=entry, asset=asset_name)
        return ResolvedEntry(
            entry=entry,
            source=wrap_exports_assignment(asset.source()),
            origin="asset",
            asset_name=asset_name,
        )

    def find_asset(self, name: str) -> tuple[str, AssetProtocol] | None:
        """Find a build asset by asset name, then by chunk name.

        Returns:
            The asset name that matched and the asset, or None
        """
        asset = self.compilation.get_asset(name)
        if asset is not None:
            return name, asset

        chunk_value = self.compilation.stats.assets_by_chunk_name.get(name)
        if not chunk_value:
            return None

        # Chunks built with source maps list several files; the bundle is first
        asset_name = primary_output(chunk_value)
        asset = self.compilation.get_asset(asset_name)
        if asset is None:
            return None
        return asset_name, asset


def create_artifact_resolver(
    compilation: Compilation,
    file_adapter: FileAdapterProtocol | None = None,
) -> ArtifactResolver:
    """Create an artifact resolver for ``compilation``."""
    return ArtifactResolver(compilation, file_adapter=file_adapter)


__all__ = [
    "ArtifactResolver",
    "EXPORTS_ASSIGNMENT_PREFIX",
    "EXPORTS_ASSIGNMENT_SUFFIX",
    "ResolvedEntry",
    "create_artifact_resolver",
    "wrap_exports_assignment",
]
