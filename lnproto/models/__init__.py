"""
Unified data model exports for lnproto.

Example:
    >>> from lnproto.models import Candidate, NormalizationResult
"""

from __future__ import annotations

from lnproto.models.candidate import Candidate
from lnproto.models.version import (
    NormalizationOutcome,
    NormalizationResult,
    VersionBounds,
)

__all__ = [
    "Candidate",
    "NormalizationOutcome",
    "NormalizationResult",
    "VersionBounds",
]
