"""Load a finished bundler output directory as a compilation."""

from pathlib import Path

from pydantic import ValidationError

from entry_evaluator.adapters.file_adapter import create_file_adapter
from entry_evaluator.core.errors import ConfigError
from entry_evaluator.core.structlog_logger import get_struct_logger
from entry_evaluator.models.artifacts import FileAsset
from entry_evaluator.models.build import BuildStats, Compilation
from entry_evaluator.protocols import AssetProtocol, FileAdapterProtocol


logger = get_struct_logger(__name__)


def load_stats(
    stats_file: Path, file_adapter: FileAdapterProtocol | None = None
) -> BuildStats:
    """Read bundler stats JSON.

    Only ``assetsByChunkName`` and ``publicPath`` are used; other keys are
    kept but ignored.

    Raises:
        FileSystemError: If the file cannot be read or is not JSON
        ConfigError: If the stats do not have the expected shape
    """
    file_adapter = file_adapter or create_file_adapter()
    data = file_adapter.read_json(stats_file)
    try:
        stats = BuildStats.model_validate(data)
    except ValidationError as e:
        logger.error("invalid_stats_file", stats_file=str(stats_file), error=str(e))
        raise ConfigError(
            f"Invalid stats file '{stats_file}': {e}", {"stats_file": str(stats_file)}
        ) from e

    logger.debug(
        "stats_loaded",
        stats_file=str(stats_file),
        chunk_count=len(stats.assets_by_chunk_name),
    )
    return stats


def load_compilation(
    output_dir: Path,
    stats_file: Path | None = None,
    public_path: str | None = None,
    file_adapter: FileAdapterProtocol | None = None,
) -> Compilation:
    """Build a compilation from files on disk.

    Every file below ``output_dir`` is registered as an asset under its POSIX
    path relative to the directory. Files are read lazily.

    Args:
        output_dir: Bundler output directory
        stats_file: Bundler stats JSON; without it no chunks are known
        public_path: Overrides the stats file's ``publicPath`` when given
        file_adapter: File operations adapter
    """
    file_adapter = file_adapter or create_file_adapter()

    assets: dict[str, AssetProtocol] = {}
    if file_adapter.check_exists(output_dir):
        for path in file_adapter.list_files(output_dir):
            assets[path.relative_to(output_dir).as_posix()] = FileAsset(path)
    else:
        logger.warning("output_dir_missing", output_dir=str(output_dir))

    stats = load_stats(stats_file, file_adapter) if stats_file else BuildStats()
    compilation = Compilation(assets=assets, stats=stats, public_path=public_path)
    logger.info(
        "compilation_loaded",
        output_dir=str(output_dir),
        asset_count=len(assets),
        public_path=compilation.public_path,
    )
    return compilation


def write_artifact(
    compilation: Compilation,
    name: str,
    output_dir: Path,
    file_adapter: FileAdapterProtocol | None = None,
) -> Path:
    """Write an emitted asset to ``output_dir / name``.

    Raises:
        KeyError: If the compilation has no asset called ``name``
        FileSystemError: If the file cannot be written
    """
    file_adapter = file_adapter or create_file_adapter()
    asset = compilation.get_asset(name)
    if asset is None:
        raise KeyError(name)

    target = output_dir / name
    contents = asset.source()
    if isinstance(contents, str):
        file_adapter.write_text(target, contents)
    else:
        file_adapter.write_bytes(target, contents)
    logger.info("artifact_written", path=str(target), size=asset.size())
    return target


__all__ = ["load_compilation", "load_stats", "write_artifact"]
