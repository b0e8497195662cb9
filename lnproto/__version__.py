"""
lnproto version information.

Single source of truth for the package version, which follows Semantic
Versioning: https://semver.org/
"""

from __future__ import annotations

__version__ = "0.2.0"
