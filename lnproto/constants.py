"""
Centralized constants for lnproto.

This module defines immutable values used across lnproto, including the
markers of the lnd version string format, the layout of the bundled proto
directory, configuration file names, and logging formats. All values are
intended to be treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# lnd version string format
# ---------------------------------------------------------------------------

#: Prefix of the second token of an lnd version string.
COMMIT_PREFIX: Final[str] = "commit="

#: Prerelease marker lnd appends to every release; skipped when looking for
#: a commit count in the commit description.
BETA_MARKER: Final[str] = "beta"

#: Number of dash-separated segments kept from the commit description.
#: ``0.5.2-beta-rc3-12-g3a5e8a2`` keeps ``0.5.2-beta-rc3``.
COMMIT_SEGMENTS: Final[int] = 3

# ---------------------------------------------------------------------------
# Proto catalog layout
# ---------------------------------------------------------------------------

#: File suffix of protocol-definition files.
PROTO_SUFFIX: Final[str] = ".proto"

#: Path segments of the bundled proto directory, relative to the package.
PROTO_SUBDIR: Final[Sequence[str]] = ("proto", "lnrpc")

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Dedicated configuration file name (settings under ``[lnproto]``).
CONFIG_FILE_NAME: Final[str] = "lnproto.toml"

#: Shared project file name (settings under ``[tool.lnproto]``).
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
