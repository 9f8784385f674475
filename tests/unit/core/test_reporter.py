"""Unit tests for result reporting."""

import logging
from pathlib import Path

import pytest
from freespace.core.errors import EXIT_BELOW_THRESHOLD, EXIT_OK, ConfigError
from freespace.core.reporter import OUTPUT_NAME, GitHubOutput, report


class TestGitHubOutput:
    """Tests for GitHubOutput writer."""

    def test_creates_file(self, tmp_path: Path) -> None:
        """A missing output file is created."""
        path = tmp_path / "output"

        GitHubOutput(path).set_output("available-space", 42)

        assert path.read_text() == "available-space=42\n"

    def test_appends(self, tmp_path: Path) -> None:
        """Existing content is preserved."""
        path = tmp_path / "output"
        path.write_text("previous-step=done\n")

        GitHubOutput(path).set_output("available-space", 42)

        assert path.read_text() == "previous-step=done\navailable-space=42\n"

    def test_unwritable_location(self, tmp_path: Path) -> None:
        """Writing to a directory raises ConfigError."""
        with pytest.raises(ConfigError, match="Cannot write output file"):
            GitHubOutput(tmp_path).set_output("available-space", 42)


class TestReport:
    """Tests for report function."""

    def test_threshold_met(self, tmp_path: Path) -> None:
        """Meeting the threshold exits 0 and writes the output line."""
        path = tmp_path / "output"

        code = report(500000, 1, GitHubOutput(path))

        assert code == EXIT_OK
        assert path.read_text() == f"{OUTPUT_NAME}=500000\n"

    def test_threshold_equal(self, tmp_path: Path) -> None:
        """Available space equal to the threshold is sufficient."""
        code = report(500, 500, GitHubOutput(tmp_path / "output"))

        assert code == EXIT_OK

    def test_below_threshold(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Falling short exits 1 after writing the output line."""
        path = tmp_path / "output"

        with caplog.at_level(logging.ERROR, logger="freespace.core.reporter"):
            code = report(500000, 999999999, GitHubOutput(path))

        assert code == EXIT_BELOW_THRESHOLD
        assert path.read_text() == "available-space=500000\n"
        assert "Available space 500000 is less than desired 999999999" in caplog.text
