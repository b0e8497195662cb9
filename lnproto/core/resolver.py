"""
Resolution of an lnd version string to a catalog version.

:class:`VersionResolver` ties :func:`~lnproto.core.normalizer.normalize`
and :func:`~lnproto.core.selector.select` together under an explicit
:class:`~lnproto.models.version.VersionBounds` policy. It keeps no state
between calls, so a single instance can serve concurrent callers.

Typical usage::

    resolver = VersionResolver()
    resolver.closest("0.5.2-beta commit=v0.5.2-beta-rc3", catalog)
"""

from __future__ import annotations

from typing import Iterable, Optional

from lnproto.core import normalizer, selector
from lnproto.models.version import NormalizationResult, VersionBounds
from lnproto.utils.logger import get_logger

logger = get_logger("core.resolver")


class VersionResolver:
    """Resolve lnd version strings against catalogs of proto versions.

    Args:
        bounds: Range of catalog versions this resolver may return.
            Defaults to an open range.
    """

    __slots__ = ("bounds",)

    def __init__(self, bounds: Optional[VersionBounds] = None) -> None:
        self.bounds: VersionBounds = bounds or VersionBounds()

    def __repr__(self) -> str:
        return f"VersionResolver(bounds={self.bounds})"

    def normalize(self, raw: str) -> NormalizationResult:
        return normalizer.normalize(raw)

    def select(
        self,
        normalization: NormalizationResult,
        catalog: Iterable[object],
    ) -> Optional[str]:
        """Select the best catalog entry for an already normalized version."""
        return selector.select(
            normalization.version,
            normalization.build_number,
            catalog,
            bounds=None if self.bounds.is_open else self.bounds,
        )

    def closest(self, raw: str, catalog: Iterable[object]) -> Optional[str]:
        """Return the catalog entry closest to the version reported as ``raw``.

        Returns ``None`` when the catalog is empty or every entry is newer
        than the reported version.
        """
        return self.select(self.normalize(raw), catalog)

    def latest(self, catalog: Iterable[object]) -> Optional[str]:
        """Return the newest catalog entry within bounds."""
        bounds = None if self.bounds.is_open else self.bounds
        candidate = selector.highest(selector.parse_catalog(catalog, bounds))
        if candidate is None:
            logger.debug("No catalog entry within bounds %s", self.bounds)
            return None
        return candidate.raw


def resolve_closest_version(
    raw: str,
    catalog: Iterable[object],
    *,
    bounds: Optional[VersionBounds] = None,
) -> Optional[str]:
    """Return the catalog entry closest to the version reported as ``raw``.

    Examples:
        >>> resolve_closest_version(
        ...     "0.5.1-beta commit=abcdef-0.5.1-beta.rc2",
        ...     ["0.5.0", "0.5.1-beta.rc1", "0.5.1-beta.rc2", "0.5.2-beta.rc3"],
        ... )
        '0.5.1-beta.rc2'
    """
    return VersionResolver(bounds).closest(raw, catalog)
