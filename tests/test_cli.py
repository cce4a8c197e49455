"""Tests for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from readme_sync.cli import app, _setup_logging


runner = CliRunner()


def _write_docs(directory: Path) -> None:
    (directory / "a.md").write_text('title: "Fetch Records"\ndescription: "Pulls data"\n')
    (directory / "b.md").write_text("# untitled\n")


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("readme_sync.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode only shows warnings."""
        with patch("readme_sync.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            assert mock_config.call_args[1]["level"] == logging.WARNING


class TestSyncCommand:
    """Tests for the sync command."""

    def test_writes_readme(self, tmp_path: Path) -> None:
        """Default mode writes the link listing and confirms."""
        _write_docs(tmp_path)
        result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 0
        assert "README.md updated" in result.stdout
        readme = (tmp_path / "README.md").read_text(encoding="utf-8")
        assert readme.endswith("- [Fetch Records](a.md)\n- [b.md](b.md)\n")

    def test_dry_run_prints_content(self, tmp_path: Path) -> None:
        """Dry run prints the result and writes nothing."""
        _write_docs(tmp_path)
        result = runner.invoke(app, [str(tmp_path), "--dry-run"])

        assert result.exit_code == 0
        assert "- [Fetch Records](a.md)" in result.stdout
        assert not (tmp_path / "README.md").exists()

    def test_table_header_missing_exits_without_writing(self, tmp_path: Path) -> None:
        """Table mode reports a missing header and leaves the README alone."""
        _write_docs(tmp_path)
        (tmp_path / "README.md").write_text("# Hub\n")
        result = runner.invoke(app, [str(tmp_path), "--mode", "table"])

        assert result.exit_code == 1
        assert "not found" in result.stdout
        assert (tmp_path / "README.md").read_text() == "# Hub\n"

    def test_table_mode(self, tmp_path: Path) -> None:
        _write_docs(tmp_path)
        (tmp_path / "README.md").write_text("| Script | Description |\n| --- | --- |\n")
        result = runner.invoke(app, [str(tmp_path), "-m", "table"])

        assert result.exit_code == 0
        readme = (tmp_path / "README.md").read_text(encoding="utf-8")
        assert "| [Fetch Records](a.md) | Pulls data |" in readme

    def test_invalid_mode(self, tmp_path: Path) -> None:
        """An unknown mode is a configuration error."""
        result = runner.invoke(app, [str(tmp_path), "--mode", "append"])

        assert result.exit_code == 2
        assert "Configuration error" in result.stdout

    def test_config_file(self, tmp_path: Path) -> None:
        """Settings come from the config file, options override them."""
        docs = tmp_path / "docs"
        docs.mkdir()
        _write_docs(docs)
        config = tmp_path / "readme-sync.yml"
        config.write_text("directory: docs\noutput: INDEX.md\nmode: section\n")

        result = runner.invoke(app, ["--config", str(config)])

        assert result.exit_code == 0
        assert "INDEX.md updated" in result.stdout
        assert (docs / "INDEX.md").read_text(encoding="utf-8").startswith("## 📂 Available Scripts")

    def test_malformed_frontmatter_warns(self, tmp_path: Path) -> None:
        (tmp_path / "bad.md").write_text("---\ntags: [unclosed\n---\n")
        result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 0
        assert "Warning: bad.md" in result.stdout

    def test_missing_config_file(self, tmp_path: Path) -> None:
        """A config path that does not exist is a configuration error."""
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yml")])

        assert result.exit_code == 2
        assert "Configuration error" in result.stdout
