"""Tests for the assets CLI command."""

import json
from pathlib import Path

import pytest

from entry_evaluator.cli import app


@pytest.fixture
def stats_file(tmp_path: Path) -> Path:
    path = tmp_path / "stats.json"
    path.write_text(
        json.dumps(
            {
                "assetsByChunkName": {
                    "main": ["main.js", "main.js.map"],
                    "vendor": "vendor.js",
                },
                "publicPath": "/static/",
            }
        )
    )
    return path


class TestAssetsCommand:
    def test_json_output(self, cli_runner, stats_file):
        result = cli_runner.invoke(app, ["assets", str(stats_file), "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == {
            "main": "/static/main.js",
            "vendor": "/static/vendor.js",
        }

    def test_public_path_override(self, cli_runner, stats_file):
        result = cli_runner.invoke(
            app, ["assets", str(stats_file), "--json", "--public-path", ""]
        )

        assert json.loads(result.stdout) == {"main": "main.js", "vendor": "vendor.js"}

    def test_table_output(self, cli_runner, stats_file):
        result = cli_runner.invoke(app, ["assets", str(stats_file)])

        assert result.exit_code == 0
        assert "vendor" in result.stdout
        assert "/static/main.js" in result.stdout

    def test_missing_stats_file(self, cli_runner, tmp_path):
        result = cli_runner.invoke(app, ["assets", str(tmp_path / "missing.json")])

        assert result.exit_code == 1


class TestAppOptions:
    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout.startswith("entry-evaluator v")
