"""Result reporting for freespace.

Publishes the final measurement to the CI output file and decides the
process exit code.
"""

import logging
from pathlib import Path

from freespace.core.errors import EXIT_BELOW_THRESHOLD, EXIT_OK, ConfigError

logger = logging.getLogger(__name__)

OUTPUT_NAME = "available-space"


class GitHubOutput:
    """Append-only writer for the CI key/value output file.

    Attributes:
        path: File that ``name=value`` lines are appended to.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def set_output(self, name: str, value: object) -> None:
        """Append a single ``name=value`` line.

        Raises:
            ConfigError: If the output file cannot be written.
        """
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{name}={value}\n")
        except OSError as e:
            msg = f"Cannot write output file {self.path}: {e}"
            raise ConfigError(msg) from e
        logger.debug("Wrote %s=%s to %s", name, value, self.path)


def report(final_mb: int, threshold: int, output: GitHubOutput) -> int:
    """Publish the final measurement and compute the exit code.

    The output line is always written before the threshold is checked.

    Args:
        final_mb: Latest available space measurement in MB.
        threshold: Desired minimum free space in MB.
        output: Destination for the ``available-space`` output.

    Returns:
        EXIT_OK if the threshold is met, EXIT_BELOW_THRESHOLD otherwise.
    """
    output.set_output(OUTPUT_NAME, final_mb)

    if final_mb < threshold:
        logger.error("Available space %d is less than desired %d", final_mb, threshold)
        return EXIT_BELOW_THRESHOLD
    return EXIT_OK
