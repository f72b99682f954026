"""Host build snapshots loaded from disk."""

from entry_evaluator.build.compilation_loader import (
    load_compilation,
    load_stats,
    write_artifact,
)


__all__ = ["load_compilation", "load_stats", "write_artifact"]
