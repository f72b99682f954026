"""Core test fixtures for the entry-evaluator project."""

import io
import logging
import os
import textwrap
from collections.abc import Callable, Generator
from pathlib import Path
from unittest.mock import Mock

import pytest
import structlog
from typer.testing import CliRunner

from entry_evaluator.evaluation.assembler import ArtifactAssembler
from entry_evaluator.models.artifacts import StringAsset
from entry_evaluator.models.build import Compilation
from entry_evaluator.protocols import FileAdapterProtocol, TemplateAdapterProtocol


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_file_adapter() -> Mock:
    """Create a mock file adapter that reports no files on disk."""
    adapter = Mock(spec=FileAdapterProtocol)
    adapter.check_exists.return_value = False
    adapter.is_file.return_value = False
    return adapter


@pytest.fixture
def mock_template_adapter() -> Mock:
    """Create a mock template adapter for testing."""
    return Mock(spec=TemplateAdapterProtocol)


@pytest.fixture
def write_entry(tmp_path: Path) -> Callable[[str, str], str]:
    """Write a dedented entry file below tmp_path and return its path."""

    def _write(name: str, source: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source).lstrip("\n"), encoding="utf-8")
        return str(path)

    return _write


# ---- Build Fixtures ----


@pytest.fixture
def compilation() -> Compilation:
    """A compilation with a source-mapped main chunk and a plain vendor chunk."""
    return Compilation(
        assets={
            "main.js": StringAsset(
                '{"default": "<p>from bundle</p>", "title": "Bundle"}'
            ),
            "main.js.map": StringAsset('{"version": 3}'),
            "vendor.js": StringAsset('{"vendor": True}'),
        },
        stats={
            "assetsByChunkName": {
                "main": ["main.js", "main.js.map"],
                "vendor": "vendor.js",
            },
            "publicPath": "/static/",
        },
    )


@pytest.fixture
def diagnostic_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def assembler(diagnostic_stream: io.StringIO) -> ArtifactAssembler:
    """Assembler writing diagnostics to an in-memory stream."""
    return ArtifactAssembler(diagnostic_stream=diagnostic_stream)


# ---- Test Isolation Fixtures ----


@pytest.fixture(autouse=True)
def isolated_logging() -> Generator[None, None, None]:
    """Undo logging configuration done by CLI invocations or setup_logging."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    try:
        yield
    finally:
        for handler in root_logger.handlers:
            if handler not in saved_handlers:
                handler.close()
        root_logger.handlers = saved_handlers
        root_logger.setLevel(saved_level)
        structlog.reset_defaults()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep ENTRY_EVALUATOR_* variables and .env files out of tests."""
    for key in list(os.environ):
        if key.startswith("ENTRY_EVALUATOR_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
