"""Best-effort parallel directory reclamation.

Removes a set of paths concurrently. A failure on one path never aborts
or affects the others; every attempt is classified into a
DeletionOutcome and the outcomes are aggregated once all attempts
have finished.
"""

import logging
import os
import shutil
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum

from freespace.models.outcome import DeletionOutcome, DeletionStatus

logger = logging.getLogger(__name__)

# Tag the legacy tally compares against. No DeletionStatus carries it.
LEGACY_ERROR_TAG = "error"


class TallyPolicy(str, Enum):
    """How deletion outcomes are counted as failures.

    Attributes:
        FAILED: Count PermissionDenied and UnknownError outcomes.
        LITERAL: Count outcomes whose status equals the generic "error"
            tag. Matches nothing, so the tally is always zero.
    """

    FAILED = "failed"
    LITERAL = "literal"


def delete_directories(paths: Sequence[str]) -> list[DeletionOutcome]:
    """Delete paths in parallel and classify each attempt.

    All deletions are started at once and joined before returning.
    No attempt is cancelled or retried.

    Args:
        paths: Absolute filesystem paths to remove.

    Returns:
        One DeletionOutcome per input path, in input order.
    """
    if not paths:
        return []

    with ThreadPoolExecutor(max_workers=len(paths), thread_name_prefix="reclaim") as executor:
        futures = [executor.submit(_delete_single, path) for path in paths]

    return [_collect(path, future) for path, future in zip(paths, futures, strict=True)]


def count_failures(
    outcomes: Sequence[DeletionOutcome],
    policy: TallyPolicy = TallyPolicy.FAILED,
) -> int:
    """Count failed deletion outcomes.

    Args:
        outcomes: Outcomes returned by delete_directories.
        policy: Which outcomes count as failures.

    Returns:
        Number of outcomes counted as failures.
    """
    if policy == TallyPolicy.LITERAL:
        return sum(1 for o in outcomes if o.status.value == LEGACY_ERROR_TAG)
    return sum(1 for o in outcomes if o.failed)


def reclaim(
    paths: Sequence[str],
    policy: TallyPolicy = TallyPolicy.FAILED,
) -> int:
    """Delete paths in parallel and return the number of failures.

    Args:
        paths: Absolute filesystem paths to remove.
        policy: Which outcomes count as failures.

    Returns:
        Failure count according to policy.
    """
    return count_failures(delete_directories(paths), policy)


def _delete_single(path: str) -> DeletionOutcome:
    """Remove a single path recursively.

    Symlinks are unlinked without following them. Everything else goes
    to shutil.rmtree, falling back to unlink for plain files, so the
    removal call itself reports a missing or inaccessible path.

    Args:
        path: Absolute filesystem path to remove.

    Returns:
        DeletionOutcome classifying the attempt.
    """
    logger.info("Deleting: %s", path)
    try:
        if os.path.islink(path):
            os.unlink(path)
        else:
            try:
                shutil.rmtree(path)
            except NotADirectoryError:
                os.unlink(path)
    except FileNotFoundError:
        logger.warning("Directory not found: %s", path)
        return DeletionOutcome(path, DeletionStatus.NOT_FOUND, "Directory not found")
    except PermissionError:
        logger.error("Permission denied: %s", path)
        return DeletionOutcome(path, DeletionStatus.PERMISSION_DENIED, "Permission denied")
    except OSError as e:
        logger.error("Error deleting %s: %s", path, e)
        return DeletionOutcome(path, DeletionStatus.UNKNOWN_ERROR, f"Unknown error: {e}")

    return DeletionOutcome(path, DeletionStatus.SUCCESS)


def _collect(path: str, future: "Future[DeletionOutcome]") -> DeletionOutcome:
    """Turn a finished deletion future into an outcome.

    Exceptions that escaped the worker are classified as unknown errors
    so one path can never abort the join.
    """
    error = future.exception()
    if error is None:
        return future.result()

    logger.error("Error deleting %s: %s", path, error)
    return DeletionOutcome(path, DeletionStatus.UNKNOWN_ERROR, f"Unknown error: {error}")
