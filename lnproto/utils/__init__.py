"""
Utility helpers for lnproto.

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Proto directory helpers
- Semantic version helpers
"""

from __future__ import annotations

from lnproto.utils.filesystem import (
    list_files,
    strip_suffix,
    validate_directory,
    validate_path,
)
from lnproto.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)
from lnproto.utils.console import (
    colorize_outcome,
    get_raw_console,
    print_error,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)
from lnproto.utils.version_utils import (
    closest_at_most,
    coerce_version,
    numeric_build,
    parse_version,
    strip_build,
)

__all__ = [
    # Console
    "print_error",
    "print_table",
    "print_success",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    "colorize_outcome",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
    # Filesystem
    "list_files",
    "strip_suffix",
    "validate_directory",
    "validate_path",
    # Versions
    "closest_at_most",
    "coerce_version",
    "numeric_build",
    "parse_version",
    "strip_build",
]
