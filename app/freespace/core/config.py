"""Run configuration for freespace.

The configuration is resolved once at startup from the command line and
the environment, validated, and then passed explicitly to the parts of
the run that need it.
"""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from freespace.core.errors import ConfigError
from freespace.core.paths import DIRECTORIES_TO_REMOVE, OUTPUT_ENV_VAR, ROOT_PATH


class RunConfig(BaseModel):
    """Immutable configuration for a single invocation.

    Attributes:
        threshold: Desired minimum free space in MB.
        output_path: File that CI key/value output lines are appended to.
        root_path: Path whose filesystem is measured.
        directories: Paths deleted when free space falls short.
        sync: Run the filesystem sync diagnostic after reclamation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    threshold: int
    output_path: Path
    root_path: Path = Path(ROOT_PATH)
    directories: tuple[str, ...] = DIRECTORIES_TO_REMOVE
    sync: bool = False

    @field_validator("directories")
    @classmethod
    def validate_absolute(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Ensure every reclamation target is an absolute path."""
        for path in v:
            if not path.startswith("/"):
                msg = f"Reclamation target must be absolute: {path}"
                raise ValueError(msg)
        return v


def load_config(
    threshold: int,
    *,
    environ: Mapping[str, str] | None = None,
    sync: bool = False,
) -> RunConfig:
    """Build the run configuration.

    Args:
        threshold: Desired minimum free space in MB.
        environ: Environment to read from. Defaults to os.environ.
        sync: Run the filesystem sync diagnostic after reclamation.

    Returns:
        Validated RunConfig.

    Raises:
        ConfigError: If GITHUB_OUTPUT is unset or empty, or validation fails.
    """
    env = os.environ if environ is None else environ

    output_path = env.get(OUTPUT_ENV_VAR)
    if not output_path:
        msg = f"{OUTPUT_ENV_VAR} environment variable not found"
        raise ConfigError(msg)

    try:
        return RunConfig(threshold=threshold, output_path=Path(output_path), sync=sync)
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ConfigError(msg) from e
