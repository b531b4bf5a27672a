"""Tests for artifact models and collection."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from release_uploader.core.artifacts import collect_artifacts, parse_artifact_list
from release_uploader.core.errors import ConfigurationError
from release_uploader.core.models import Artifact, RemoteAsset, UploadReport


class TestArtifact:
    def test_from_path_reads_size_and_guesses_type(self, tmp_path: Path) -> None:
        file = tmp_path / "app.zip"
        file.write_bytes(b"PK\x03\x04rest")

        artifact = Artifact.from_path(file)

        assert artifact.name == "app.zip"
        assert artifact.content_type == "application/zip"
        assert artifact.content_length == 8
        assert artifact.read() == b"PK\x03\x04rest"

    def test_from_path_rereads_file_on_each_read(self, tmp_path: Path) -> None:
        file = tmp_path / "notes.txt"
        file.write_text("v1")
        artifact = Artifact.from_path(file)

        assert artifact.read() == b"v1"
        file.write_text("v2")
        assert artifact.read() == b"v2"

    def test_content_type_override_and_fallback(self, tmp_path: Path) -> None:
        file = tmp_path / "binary"
        file.write_bytes(b"\x00")

        assert Artifact.from_path(file).content_type == "application/octet-stream"
        assert (
            Artifact.from_path(file, content_type="application/x-custom").content_type
            == "application/x-custom"
        )

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="File not found"):
            Artifact.from_path(tmp_path / "nope.zip")

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(ValueError):
            Artifact(name="x", content_type="text/plain", content_length=-1, source=bytes)

    def test_artifacts_are_immutable(self) -> None:
        artifact = Artifact.from_bytes("x.txt", b"abc")
        with pytest.raises(AttributeError):
            artifact.name = "y.txt"  # type: ignore[misc]


def test_remote_asset_from_dict() -> None:
    asset = RemoteAsset.from_dict({"id": "12", "name": "app.zip", "size": 3})
    assert asset == RemoteAsset(id=12, name="app.zip")


def test_upload_report_ok() -> None:
    report = UploadReport(uploaded=["a"], failed={"b": "HTTP 500"}, deleted=["a"])
    assert not report.ok
    assert UploadReport().ok


def test_parse_artifact_list() -> None:
    assert parse_artifact_list(None) == []
    assert parse_artifact_list(" a.zip ,b.zip\n\n c/*.txt ,") == ["a.zip", "b.zip", "c/*.txt"]


class TestCollectArtifacts:
    @pytest.fixture
    def dist(self, tmp_path: Path) -> Path:
        (tmp_path / "dist").mkdir()
        (tmp_path / "dist" / "pkg-1.0.tar.gz").write_bytes(b"tar")
        (tmp_path / "dist" / "pkg-1.0-py3-none-any.whl").write_bytes(b"whl")
        (tmp_path / "dist" / "nested").mkdir()
        (tmp_path / "dist" / "nested" / "SHA256SUMS").write_text("sums")
        return tmp_path / "dist"

    def test_glob_expansion_skips_directories_and_duplicates(self, dist: Path) -> None:
        artifacts = collect_artifacts(
            [str(dist / "*"), str(dist / "*.whl"), str(dist / "**" / "SHA256SUMS")]
        )

        assert [a.name for a in artifacts] == [
            "pkg-1.0-py3-none-any.whl",
            "pkg-1.0.tar.gz",
            "SHA256SUMS",
        ]

    def test_content_type_applies_to_all(self, dist: Path) -> None:
        artifacts = collect_artifacts([str(dist / "*.*")], content_type="application/x-dist")
        assert {a.content_type for a in artifacts} == {"application/x-dist"}

    def test_unmatched_pattern_warns(
        self, dist: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="ReleaseUploader"):
            artifacts = collect_artifacts([str(dist / "*.exe")])

        assert artifacts == []
        assert any("did not match any files" in r.getMessage() for r in caplog.records)

    def test_unmatched_pattern_fails_build(self, dist: Path) -> None:
        with pytest.raises(ConfigurationError, match="did not match"):
            collect_artifacts([str(dist / "*.exe")], errors_fail_build=True)

    def test_same_basename_in_different_directories_is_skipped(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        for sub in ("a", "b"):
            (tmp_path / sub).mkdir()
            (tmp_path / sub / "app.zip").write_bytes(sub.encode())

        with caplog.at_level(logging.WARNING, logger="ReleaseUploader"):
            artifacts = collect_artifacts([str(tmp_path / "*" / "app.zip")])

        assert [a.name for a in artifacts] == ["app.zip"]
        assert artifacts[0].read() == b"a"
        assert any("is used by both" in r.getMessage() for r in caplog.records)

    def test_same_basename_fails_build(self, tmp_path: Path) -> None:
        for sub in ("a", "b"):
            (tmp_path / sub).mkdir()
            (tmp_path / sub / "app.zip").write_bytes(b"zip")

        with pytest.raises(ConfigurationError, match="is used by both"):
            collect_artifacts([str(tmp_path / "*" / "app.zip")], errors_fail_build=True)
