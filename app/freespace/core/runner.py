"""Run orchestration for freespace.

Measures free space, reclaims directories only when it falls short of
the threshold, and measures again afterwards.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from freespace.core.paths import DIRECTORIES_TO_REMOVE, ROOT_PATH
from freespace.core.probe import measure
from freespace.core.reclaimer import count_failures, delete_directories
from freespace.models.outcome import DeletionOutcome
from freespace.utils.shell import sync_filesystems

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunResult:
    """Measurements and deletion outcomes of a run.

    Attributes:
        initial_mb: Available space before any reclamation.
        final_mb: Latest available space measurement.
        outcomes: Deletion outcomes, empty if reclamation was skipped.
        failures: Number of failed deletions.
    """

    initial_mb: int
    final_mb: int
    outcomes: tuple[DeletionOutcome, ...] = ()
    failures: int = 0

    @property
    def reclaimed(self) -> bool:
        """Check if any deletion was attempted."""
        return bool(self.outcomes)


def run_with_outcomes(
    threshold: int,
    *,
    root_path: str | Path = ROOT_PATH,
    directories: Sequence[str] = DIRECTORIES_TO_REMOVE,
    sync: bool = False,
) -> RunResult:
    """Ensure free space, keeping the per-path deletion outcomes.

    Args:
        threshold: Desired minimum free space in MB.
        root_path: Path whose filesystem is measured.
        directories: Paths deleted when free space falls short.
        sync: Run the filesystem sync diagnostic after reclamation.

    Returns:
        RunResult with the initial and latest measurements.

    Raises:
        ProbeError: If free space cannot be measured.
    """
    available_mb = measure(root_path)
    if available_mb >= threshold:
        logger.info("Sufficient free space, not deleting anything")
        return RunResult(initial_mb=available_mb, final_mb=available_mb)

    if not directories:
        logger.warning("Free space is short but there are no directories to delete")
        return RunResult(initial_mb=available_mb, final_mb=available_mb)

    logger.info("Deleting directories to free up space")
    outcomes = delete_directories(directories)
    failures = count_failures(outcomes)
    if failures:
        logger.warning("%d of %d deletion(s) failed", failures, len(outcomes))

    if sync:
        sync_filesystems()

    return RunResult(
        initial_mb=available_mb,
        final_mb=measure(root_path),
        outcomes=tuple(outcomes),
        failures=failures,
    )


def run(
    threshold: int,
    *,
    root_path: str | Path = ROOT_PATH,
    directories: Sequence[str] = DIRECTORIES_TO_REMOVE,
    sync: bool = False,
) -> int:
    """Ensure free space and return the latest measurement in MB.

    Reclamation failures never abort the run.
    """
    result = run_with_outcomes(threshold, root_path=root_path, directories=directories, sync=sync)
    return result.final_mb
