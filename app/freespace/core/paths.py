"""Well-known paths for freespace.

The reclamation targets are large toolchain and runtime directories
preinstalled on hosted CI runners that builds rarely need.
"""

# Filesystem whose free space is measured
ROOT_PATH = "/"

# Deleted concurrently when free space on ROOT_PATH falls short.
# Order is only used for reporting.
DIRECTORIES_TO_REMOVE: tuple[str, ...] = (
    "/usr/local/lib/android",
    "/usr/local/.ghcup",
    "/opt/hostedtoolcache/CodeQL",
    "/opt/microsoft/",
    "/usr/local/share",
    "/usr/share/swift/",
)

# Environment variable naming the CI key/value output file
OUTPUT_ENV_VAR = "GITHUB_OUTPUT"
