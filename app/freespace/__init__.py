"""freespace - Reclaim disk space on CI build agents.

Measures free space on the root filesystem and deletes known-large,
non-essential toolchain directories when the space falls short.
"""

__version__ = "0.1.0"
