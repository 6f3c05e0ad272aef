"""
Tests for the catalog_build CLI.
"""

import json

import pytest

from scripts import catalog_build


@pytest.fixture
def library(tmp_path, write_file, headers, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_file(tmp_path / "Live" / "01 Opening.mp3", headers["mp3"])
    write_file(tmp_path / "Live" / "front.png", headers["png"])
    return tmp_path


class TestBuildCommand:
    """Test the default build command."""

    def test_no_arguments_builds_working_directory(self, library, capsys):
        """Test running without arguments builds the current directory."""
        catalog_build.main([])

        index = json.loads((library / "index.json").read_text(encoding="utf-8"))
        assert [c["name"] for c in index["albums"]] == ["Live"]
        out = capsys.readouterr().out
        assert "CATALOG BUILD COMPLETE" in out
        assert "Songs: 1 (1 new)" in out

    def test_path_and_dry_run(self, library, tmp_path, capsys):
        """Test --path selects the base directory and --dry-run writes nothing."""
        catalog_build.main(["build", "--dry-run", "--quiet", f"--path={library}"])

        assert not (library / "index.json").exists()
        assert "DRY-RUN" in capsys.readouterr().out

    def test_missing_path_exits(self, tmp_path, capsys):
        """Test a base directory that cannot be listed is fatal."""
        with pytest.raises(SystemExit) as exc:
            catalog_build.main([f"--path={tmp_path / 'missing'}", "--quiet"])

        assert exc.value.code == 1
        assert "Error" in capsys.readouterr().err


class TestValidateCommand:
    """Test the validate command."""

    def test_passes_after_build(self, library, capsys):
        """Test validation succeeds on a built catalog."""
        catalog_build.main(["--quiet"])
        catalog_build.main(["validate"])
        assert "All checks passed" in capsys.readouterr().out

    def test_fails_without_manifests(self, library):
        """Test validation exits 1 when manifests are missing."""
        with pytest.raises(SystemExit) as exc:
            catalog_build.main(["validate"])
        assert exc.value.code == 1


class TestClassifyCommand:
    """Test the classify command."""

    def test_prints_kinds(self, library, capsys):
        """Test each file is printed with its detected kind and format."""
        song = library / "Live" / "01 Opening.mp3"
        cover = library / "Live" / "front.png"
        catalog_build.main(["classify", str(song), str(cover), str(library / "nothing")])

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split()[:2] == ["audio", "mp3"]
        assert lines[1].split()[:2] == ["image", "png"]
        assert lines[2].split()[:2] == ["unknown", "-"]
