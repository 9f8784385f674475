"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path
from types import SimpleNamespace

import pytest
from freespace.models.outcome import DeletionOutcome, DeletionStatus


@pytest.fixture
def github_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point GITHUB_OUTPUT at a fresh file under tmp_path."""
    output = tmp_path / "github_output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output))
    return output


@pytest.fixture
def no_github_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove GITHUB_OUTPUT from the environment."""
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)


@pytest.fixture
def statvfs_result() -> SimpleNamespace:
    """statvfs result for a filesystem with 500000 MB available."""
    # 4096 * 122070313 = 500000002048 bytes
    return SimpleNamespace(f_bsize=4096, f_frsize=4096, f_bavail=122070313)


@pytest.fixture
def mixed_outcomes() -> list[DeletionOutcome]:
    """One outcome of every status."""
    return [
        DeletionOutcome("/usr/local/lib/android", DeletionStatus.SUCCESS),
        DeletionOutcome("/usr/local/.ghcup", DeletionStatus.NOT_FOUND, "Directory not found"),
        DeletionOutcome(
            "/opt/hostedtoolcache/CodeQL",
            DeletionStatus.PERMISSION_DENIED,
            "Permission denied",
        ),
        DeletionOutcome(
            "/opt/microsoft/",
            DeletionStatus.UNKNOWN_ERROR,
            "Unknown error: [Errno 16] Device or resource busy",
        ),
    ]
