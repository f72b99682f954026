"""Map build chunks to the public paths templates reference."""

from collections.abc import Mapping, Sequence

from entry_evaluator.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


def primary_output(chunk_value: str | Sequence[str]) -> str:
    """Return the primary output file of a chunk.

    Bundlers emit one list per chunk when source maps are enabled. The bundle
    itself is assumed to come first; this matches common bundler output but
    is not guaranteed by every bundler version.

    Raises:
        ValueError: If the chunk lists no output files
    """
    if isinstance(chunk_value, str):
        return chunk_value
    if not chunk_value:
        raise ValueError("Chunk has no output files")
    return chunk_value[0]


def map_assets(
    chunk_table: Mapping[str, str | Sequence[str]], public_path: str | None = ""
) -> dict[str, str]:
    """Map every chunk name to its primary output, prefixed with ``public_path``.

    Args:
        chunk_table: Chunk name to output file or ordered output files
        public_path: Prefix prepended to every path when non-empty

    Returns:
        Chunk name to public path
    """
    assets: dict[str, str] = {}
    for chunk, chunk_value in chunk_table.items():
        try:
            path = primary_output(chunk_value)
        except ValueError as e:
            raise ValueError(f"Chunk '{chunk}' has no output files") from e
        assets[chunk] = f"{public_path}{path}" if public_path else path

    logger.debug("assets_mapped", chunk_count=len(assets), public_path=public_path)
    return assets


__all__ = ["map_assets", "primary_output"]
