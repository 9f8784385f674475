"""Deletion outcome models.

This module defines the per-path result of a reclamation attempt and
the classification tags used for it.
"""

from dataclasses import dataclass
from enum import Enum


class DeletionStatus(str, Enum):
    """Classification of a single deletion attempt.

    Attributes:
        SUCCESS: The path was removed.
        NOT_FOUND: The path did not exist. Benign.
        PERMISSION_DENIED: Insufficient privilege to remove the path.
        UNKNOWN_ERROR: Any other failure while removing the path.
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    UNKNOWN_ERROR = "unknown_error"


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Result of attempting to delete a single path.

    Attributes:
        path: Absolute path that was operated on.
        status: How the attempt was classified.
        reason: Diagnostic detail for non-success outcomes, None otherwise.
    """

    path: str
    status: DeletionStatus
    reason: str | None = None

    def __post_init__(self) -> None:
        """Validate outcome data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @property
    def succeeded(self) -> bool:
        """Check if the path was removed."""
        return self.status == DeletionStatus.SUCCESS

    @property
    def failed(self) -> bool:
        """Check if the attempt failed for a reason other than absence."""
        return self.status in (DeletionStatus.PERMISSION_DENIED, DeletionStatus.UNKNOWN_ERROR)
