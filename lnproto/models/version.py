"""
Normalization result and version bound models for lnproto.

A :class:`NormalizationResult` describes what was learned from a version
string reported by an lnd node. Its :attr:`~NormalizationResult.outcome`
tells the three possible cases apart without relying on exceptions.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional

from semantic_version import Version


class NormalizationOutcome(str, enum.Enum):
    """How a raw lnd version string was interpreted."""

    #: Canonical semver, possibly with prerelease identifiers.
    VERSION = "version"

    #: Canonical release semver plus a numeric build number.
    BUILD = "build"

    #: Normalization failed; the first token is used verbatim.
    FALLBACK = "fallback"


@dataclass(frozen=True)
class NormalizationResult:
    """
    Outcome of normalizing a raw lnd version string.

    Attributes:
        raw: The string as reported by the node.
        version: Canonical semver text without build metadata, or the
            unmodified first token on fallback.
        outcome: Which of the three normalization cases applied.
        build_number: Build number extracted from the commit description.
        error: Reason normalization fell back, if it did.
    """

    raw: str
    version: str
    outcome: NormalizationOutcome = NormalizationOutcome.VERSION
    build_number: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.outcome is NormalizationOutcome.FALLBACK

    @property
    def full_version(self) -> str:
        """Version text with the build number appended as build metadata."""
        if self.build_number is None:
            return self.version
        return f"{self.version}+{self.build_number}"

    def to_json(self) -> Dict[str, Any]:
        return {
            "raw": self.raw,
            "version": self.version,
            "outcome": self.outcome.value,
            "build_number": self.build_number,
            "error": self.error,
        }


@dataclass(frozen=True)
class VersionBounds:
    """
    Inclusive range of catalog versions a resolver may return.

    Either end may be ``None`` to leave that side open. Both ends are
    inclusive, so ``lowest`` itself is a valid result of
    :meth:`~lnproto.core.resolver.VersionResolver.latest`. Build metadata of
    candidates is ignored when checking the range.
    """

    lowest: Optional[Version] = None
    highest: Optional[Version] = None

    @classmethod
    def from_strings(
        cls,
        lowest: Optional[str] = None,
        highest: Optional[str] = None,
    ) -> "VersionBounds":
        """Build bounds from version text.

        Raises:
            ValueError: If either bound is not a valid semantic version.
        """
        return cls(
            lowest=Version(lowest) if lowest is not None else None,
            highest=Version(highest) if highest is not None else None,
        )

    @property
    def is_open(self) -> bool:
        return self.lowest is None and self.highest is None

    def contains(self, version: Version) -> bool:
        if self.lowest is not None and version < self.lowest:
            return False
        if self.highest is not None and version > self.highest:
            return False
        return True

    def __str__(self) -> str:
        low = str(self.lowest) if self.lowest is not None else "*"
        high = str(self.highest) if self.highest is not None else "*"
        return f"[{low}, {high}]"
