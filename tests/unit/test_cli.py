"""
Tests for the minigrep command-line interface.

Covers argument resolution, exit codes, and where output and error messages
are written.
"""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from minigrep.cli import main


POEM = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me.\n"


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCLI:
    """Test CLI functionality."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def _write_poem(self, tmp_path: Path) -> str:
        poem = tmp_path / "poem.txt"
        poem.write_text(POEM, encoding="utf-8")
        return str(poem)

    def test_prints_matching_lines(self, tmp_path: Path):
        result = self.runner.invoke(main, ["duct", self._write_poem(tmp_path)])

        assert result.exit_code == 0
        assert result.output == "safe, fast, productive.\n"

    def test_no_matches_exits_zero(self, tmp_path: Path):
        result = self.runner.invoke(main, ["RUST", self._write_poem(tmp_path)])

        assert result.exit_code == 0
        assert result.output == ""

    def test_ignore_case_flag(self, tmp_path: Path):
        result = self.runner.invoke(main, ["--ignore-case", "rust", self._write_poem(tmp_path)])

        assert result.exit_code == 0
        assert result.output == "Rust:\nTrust me.\n"

    def test_short_ignore_case_flag(self, tmp_path: Path):
        result = self.runner.invoke(main, ["-i", "PICK", self._write_poem(tmp_path)])

        assert result.exit_code == 0
        assert result.output == "Pick three.\n"

    def test_missing_query(self):
        result = self.runner.invoke(main, [])

        assert result.exit_code == 1
        assert "Problem parsing arguments: Didn't get a query string" in result.output

    def test_missing_file_path(self):
        result = self.runner.invoke(main, ["needle"])

        assert result.exit_code == 1
        assert "Problem parsing arguments: Didn't get a file path" in result.output

    def test_unreadable_file(self, tmp_path: Path):
        result = self.runner.invoke(main, ["needle", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Application error:" in result.output
        assert "No such file or directory" in result.output

    def test_dash_prefixed_query_is_positional(self, tmp_path: Path):
        source = tmp_path / "flags.txt"
        source.write_text("use -x here\nnothing\n", encoding="utf-8")

        result = self.runner.invoke(main, ["-x", str(source)])

        assert result.exit_code == 0
        assert result.output == "use -x here\n"

    def test_extra_arguments_are_ignored(self, tmp_path: Path):
        result = self.runner.invoke(main, ["Pick", self._write_poem(tmp_path), "extra"])

        assert result.exit_code == 0
        assert result.output == "Pick three.\n"

    def test_flag_shaped_query_after_double_dash(self, tmp_path: Path):
        """Test that -- lets the query be one of the command's own options."""
        source = tmp_path / "notes.txt"
        source.write_text("grep -v pattern\ngrep -i pattern\n--help wanted\n", encoding="utf-8")

        result = self.runner.invoke(main, ["--", "-v", str(source)])
        assert result.exit_code == 0
        assert result.output == "grep -v pattern\n"

        result = self.runner.invoke(main, ["--", "--help", str(source)])
        assert result.exit_code == 0
        assert result.output == "--help wanted\n"

    def test_options_after_query_are_not_parsed(self, tmp_path: Path):
        """Test that a trailing -i does not switch to case-insensitive matching."""
        result = self.runner.invoke(main, ["RUST", self._write_poem(tmp_path), "-i"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_option_between_positionals_is_a_file_path(self, tmp_path: Path):
        self._write_poem(tmp_path)

        result = self.runner.invoke(main, ["rust", "-i", str(tmp_path / "poem.txt")])

        assert result.exit_code == 1
        assert "Application error:" in result.stderr

    def test_verbose_logs_to_stderr(self, tmp_path: Path):
        result = self.runner.invoke(main, ["-v", "duct", self._write_poem(tmp_path)])

        assert result.exit_code == 0
        assert result.stdout == "safe, fast, productive.\n"
        assert "minigrep.runner - DEBUG - Running search" in result.stderr
        assert "DEBUG" not in result.stdout

    def test_quiet_by_default(self, tmp_path: Path):
        result = self.runner.invoke(main, ["duct", self._write_poem(tmp_path)])

        assert result.exit_code == 0
        assert result.stderr == ""
