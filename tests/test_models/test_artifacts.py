"""Tests for asset and artifact models."""

from pathlib import Path

from entry_evaluator.models.artifacts import FileAsset, OutputArtifact, StringAsset
from entry_evaluator.protocols import AssetProtocol


class TestStringAsset:
    def test_size_counts_utf8_bytes(self):
        asset = StringAsset("naïve ☃")

        assert asset.source() == "naïve ☃"
        assert asset.size() == len("naïve ☃".encode())
        assert asset.size() == 10

    def test_bytes_payload(self):
        asset = StringAsset(b"\x00\x01\x02")

        assert asset.size() == 3

    def test_satisfies_asset_protocol(self):
        assert isinstance(StringAsset(""), AssetProtocol)


class TestOutputArtifact:
    def test_source_and_size(self):
        artifact = OutputArtifact("index.html", "<html><p>hi</p></html>")

        assert artifact.source() == "<html><p>hi</p></html>"
        assert artifact.size() == 22
        assert artifact.destination == "index.html"

    def test_equality(self):
        assert OutputArtifact("a", "x") == OutputArtifact("a", "x")
        assert OutputArtifact("a", "x") != OutputArtifact("b", "x")
        assert len({OutputArtifact("a", "x"), OutputArtifact("a", "x")}) == 1

    def test_repr(self):
        assert repr(OutputArtifact("a.html", "abc")) == (
            "OutputArtifact(destination='a.html', size=3)"
        )


class TestFileAsset:
    def test_reads_lazily(self, tmp_path: Path):
        path = tmp_path / "bundle.py"
        asset = FileAsset(path)
        path.write_bytes(b"value = 1\n")

        assert asset.source() == b"value = 1\n"
        assert asset.size() == 10
        assert isinstance(asset, AssetProtocol)
