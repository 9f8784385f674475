"""Rich display functions for reclamation results.

Provides the table builder and summary printer used by the CLI after
directories have been reclaimed.
"""

from rich.table import Table

from freespace.models.outcome import DeletionOutcome, DeletionStatus
from freespace.utils.formatting import console, format_mb, print_success

_STATUS_LABELS: dict[DeletionStatus, str] = {
    DeletionStatus.SUCCESS: "[success]OK[/success]",
    DeletionStatus.NOT_FOUND: "[muted]ABSENT[/muted]",
    DeletionStatus.PERMISSION_DENIED: "[error]DENIED[/error]",
    DeletionStatus.UNKNOWN_ERROR: "[error]FAIL[/error]",
}


def create_outcomes_table(outcomes: list[DeletionOutcome] | tuple[DeletionOutcome, ...]) -> Table:
    """Create a Rich table displaying deletion outcomes.

    Builds a formatted table with Status, Path, and Message columns.

    Args:
        outcomes: Deletion outcomes to display.

    Returns:
        Rich Table configured for outcome display.
    """
    table = Table(
        title="Reclaimed Directories",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Path", no_wrap=True)
    table.add_column("Message")

    for outcome in outcomes:
        table.add_row(
            _STATUS_LABELS[outcome.status],
            outcome.path,
            f"[muted]{outcome.reason or ''}[/muted]",
        )

    return table


def print_outcomes_summary(
    outcomes: list[DeletionOutcome] | tuple[DeletionOutcome, ...],
    initial_mb: int,
    final_mb: int,
) -> None:
    """Print a summary of a reclamation pass.

    Args:
        outcomes: Deletion outcomes.
        initial_mb: Available space before reclamation.
        final_mb: Available space after reclamation.
    """
    deleted = sum(1 for o in outcomes if o.succeeded)
    absent = sum(1 for o in outcomes if o.status == DeletionStatus.NOT_FOUND)
    failed = sum(1 for o in outcomes if o.failed)
    freed = max(final_mb - initial_mb, 0)

    if failed == 0:
        print_success(f"Deleted {deleted}, {absent} absent. Freed {format_mb(freed)}.")
    else:
        console.print(
            f"\n[success]{deleted} deleted[/success], [muted]{absent} absent[/muted], "
            f"[error]{failed} failed[/error]. Freed {format_mb(freed)}."
        )
