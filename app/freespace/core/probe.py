"""Free space probing.

Reads filesystem block statistics and converts the space available to
unprivileged users into decimal megabytes.
"""

import logging
import os
from pathlib import Path

from freespace.core.errors import ProbeError

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1_000_000


def measure(path: str | Path) -> int:
    """Get the free disk space on the filesystem containing a path.

    Args:
        path: Any path on the filesystem to query.

    Returns:
        Available space in MB, floor of block size times available blocks.

    Raises:
        ProbeError: If the path does not exist or cannot be queried.
    """
    try:
        stat = os.statvfs(path)
    except OSError as e:
        msg = f"Cannot read filesystem statistics for {path}: {e.strerror or e}"
        raise ProbeError(msg) from e

    available_mb = stat.f_bsize * stat.f_bavail // BYTES_PER_MB
    logger.info("Available disk space on %s: %d MB", path, available_mb)
    return available_mb
