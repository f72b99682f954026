"""Tests for loading compilations from bundler output on disk."""

import json
from pathlib import Path

import pytest

from entry_evaluator.build import load_compilation, load_stats, write_artifact
from entry_evaluator.core.errors import ConfigError, FileSystemError
from entry_evaluator.models.artifacts import FileAsset, StringAsset
from entry_evaluator.models.build import Compilation


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    dist = tmp_path / "dist"
    (dist / "js").mkdir(parents=True)
    (dist / "js" / "main.js").write_text("{'default': 'main'}")
    (dist / "js" / "main.js.map").write_text("{}")
    (dist / "vendor.js").write_text("None")
    return dist


@pytest.fixture
def stats_file(tmp_path: Path) -> Path:
    path = tmp_path / "stats.json"
    path.write_text(
        json.dumps(
            {
                "hash": "abc123",
                "publicPath": "/assets/",
                "assetsByChunkName": {
                    "main": ["js/main.js", "js/main.js.map"],
                    "vendor": "vendor.js",
                },
            }
        )
    )
    return path


class TestLoadStats:
    def test_reads_chunks_and_public_path(self, stats_file):
        stats = load_stats(stats_file)

        assert stats.public_path == "/assets/"
        assert stats.assets_by_chunk_name["main"] == ["js/main.js", "js/main.js.map"]

    def test_invalid_shape_raises_config_error(self, tmp_path):
        path = tmp_path / "stats.json"
        path.write_text(json.dumps({"assetsByChunkName": {"main": []}}))

        with pytest.raises(ConfigError, match="Invalid stats file"):
            load_stats(path)

    def test_invalid_json_raises_file_system_error(self, tmp_path):
        path = tmp_path / "stats.json"
        path.write_text("{not json")

        with pytest.raises(FileSystemError):
            load_stats(path)


class TestLoadCompilation:
    def test_registers_files_by_relative_posix_path(self, output_dir, stats_file):
        compilation = load_compilation(output_dir, stats_file)

        assert sorted(compilation.assets) == [
            "js/main.js",
            "js/main.js.map",
            "vendor.js",
        ]
        asset = compilation.get_asset("js/main.js")
        assert isinstance(asset, FileAsset)
        assert asset.source() == b"{'default': 'main'}"
        assert compilation.public_path == "/assets/"

    def test_public_path_override(self, output_dir, stats_file):
        compilation = load_compilation(output_dir, stats_file, public_path="")

        assert compilation.public_path == ""
        assert compilation.stats.public_path == "/assets/"

    def test_without_stats(self, output_dir):
        compilation = load_compilation(output_dir)

        assert compilation.stats.assets_by_chunk_name == {}
        assert compilation.public_path == ""

    def test_missing_output_dir_gives_empty_compilation(self, tmp_path):
        compilation = load_compilation(tmp_path / "nowhere")

        assert dict(compilation.assets) == {}


class TestWriteArtifact:
    def test_writes_string_asset(self, tmp_path):
        compilation = Compilation()
        compilation.emit_asset("pages/index.html", StringAsset("<p>é</p>"))

        target = write_artifact(compilation, "pages/index.html", tmp_path / "out")

        assert target == tmp_path / "out" / "pages" / "index.html"
        assert target.read_text(encoding="utf-8") == "<p>é</p>"

    def test_writes_bytes_asset(self, tmp_path):
        compilation = Compilation(assets={"data.bin": StringAsset(b"\x00\x01")})

        target = write_artifact(compilation, "data.bin", tmp_path)

        assert target.read_bytes() == b"\x00\x01"

    def test_missing_asset_raises_key_error(self, tmp_path):
        with pytest.raises(KeyError):
            write_artifact(Compilation(), "index.html", tmp_path)
