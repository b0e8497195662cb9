"""
Catalog candidate model for lnproto.

Each protocol-definition file in the catalog is identified by its file
stem, which is a semantic version optionally followed by a numeric build
number: ``0.5.2-beta.rc3`` or ``0.7.1+12``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from semantic_version import Version

from lnproto.utils.version_utils import numeric_build, parse_version, strip_build


@dataclass(frozen=True)
class Candidate:
    """
    A parsed catalog entry.

    Attributes:
        raw: Catalog text exactly as supplied (the file stem).
        version: Semantic version with any build metadata removed.
        build_number: Numeric build metadata, if the entry has one.
        has_build: Whether the entry carried any build metadata at all.
        position: Index of the entry in the catalog it came from.
    """

    raw: str
    version: Version
    build_number: Optional[int] = None
    has_build: bool = False
    position: int = 0

    @classmethod
    def parse(cls, text: object, position: int = 0) -> Optional["Candidate"]:
        """Parse a catalog entry, returning ``None`` if it is malformed."""
        parsed = parse_version(text)
        if parsed is None:
            return None

        return cls(
            raw=str(text).strip(),
            version=strip_build(parsed),
            build_number=numeric_build(parsed),
            has_build=bool(parsed.build),
            position=position,
        )

    def outranks(self, other: "Candidate") -> bool:
        """Return True if this entry should be preferred over ``other``.

        Higher semver precedence wins. Between entries of equal semver the
        bare one (no build metadata) wins, then the earlier catalog entry.
        """
        if self.version != other.version:
            return self.version > other.version
        if self.has_build != other.has_build:
            return not self.has_build
        return self.position < other.position

    def __str__(self) -> str:
        return self.raw
