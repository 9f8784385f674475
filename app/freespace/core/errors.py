"""Error types for freespace.

Each fatal error carries the process exit code the CLI terminates with.
Per-path deletion failures are not exceptions; see DeletionStatus.
"""

EXIT_OK = 0
EXIT_BELOW_THRESHOLD = 1
EXIT_USAGE = 2
EXIT_CONFIG_ERROR = 3
EXIT_PROBE_ERROR = 4


class FreespaceError(Exception):
    """Base class for fatal freespace errors."""

    exit_code: int = 1


class ConfigError(FreespaceError):
    """Required configuration is missing or unusable."""

    exit_code = EXIT_CONFIG_ERROR


class ProbeError(FreespaceError, OSError):
    """Filesystem statistics could not be queried."""

    exit_code = EXIT_PROBE_ERROR
