"""Data models for freespace.

This module exports the core data structures used throughout the application.
"""

from freespace.models.outcome import DeletionOutcome, DeletionStatus

__all__ = [
    "DeletionOutcome",
    "DeletionStatus",
]
