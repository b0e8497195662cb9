"""
Closest-candidate selection over a catalog of proto versions.

Selection happens in two steps:

* **Primary match** - the highest catalog entry whose semver (build
  metadata ignored) does not exceed the target, prereleases included.
* **Build refinement** - when the target carries a build number, the
  entries with exactly the target semver and a numeric build are searched
  for the build closest to it from below.

The catalog may be in any order and may contain entries that are not
semantic versions; those are skipped.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from semantic_version import Version

from lnproto.models.candidate import Candidate
from lnproto.models.version import VersionBounds
from lnproto.utils.logger import get_logger
from lnproto.utils.version_utils import closest_at_most, coerce_version, strip_build

logger = get_logger("core.selector")


def parse_catalog(
    catalog: Iterable[object],
    bounds: Optional[VersionBounds] = None,
) -> List[Candidate]:
    """Parse catalog entries, dropping malformed and out-of-bounds ones."""
    candidates: List[Candidate] = []

    for position, entry in enumerate(catalog):
        candidate = Candidate.parse(entry, position)
        if candidate is None:
            logger.debug("Skipping malformed catalog entry: %r", entry)
            continue
        if bounds is not None and not bounds.contains(candidate.version):
            logger.debug("Skipping %s outside bounds %s", candidate, bounds)
            continue
        candidates.append(candidate)

    return candidates


def highest(candidates: Iterable[Candidate]) -> Optional[Candidate]:
    """Return the preferred candidate, see :meth:`Candidate.outranks`."""
    best: Optional[Candidate] = None
    for candidate in candidates:
        if best is None or candidate.outranks(best):
            best = candidate
    return best


def select(
    version: str,
    build_number: Optional[int],
    catalog: Iterable[object],
    *,
    bounds: Optional[VersionBounds] = None,
) -> Optional[str]:
    """Select the catalog entry that best matches ``version``.

    Args:
        version: Normalized target version. Coerced loosely, so the
            unparsed first token of a fallback normalization still works.
        build_number: Build number of the target, if known.
        catalog: Candidate version strings, in any order.
        bounds: Optional range restricting which entries may be returned.

    Returns:
        The matching catalog entry, ``<version>+<build>`` when refined by
        build number, or ``None`` if no entry is old enough.

    Examples:
        >>> select("0.5.1", None, ["0.5.0", "0.5.1-beta.rc2", "0.5.2-beta.rc3"])
        '0.5.1-beta.rc2'
        >>> select("0.5.2", 3, ["0.5.2", "0.5.2+1", "0.5.2+5"])
        '0.5.2+1'
    """
    coerced = coerce_version(version)
    if coerced is None:
        logger.warning("Cannot compare catalog against version %r", version)
        return None
    target = strip_build(coerced)

    candidates = parse_catalog(catalog, bounds)
    logger.debug(
        "Searching for closest match for version %s in range: %s",
        target,
        [candidate.raw for candidate in candidates],
    )

    primary = highest(c for c in candidates if c.version <= target)
    if primary is None:
        logger.debug("No catalog entry at or below %s", target)
        return None

    match = primary.raw
    if build_number is not None:
        refined = _refine_by_build(target, build_number, candidates)
        if refined is not None:
            match = refined

    logger.debug("Determined closest match as: %s", match)
    return match


def _refine_by_build(
    target: Version,
    build_number: int,
    candidates: List[Candidate],
) -> Optional[str]:
    builds: Dict[int, Candidate] = {}
    for candidate in candidates:
        if candidate.version != target or candidate.build_number is None:
            continue
        builds.setdefault(candidate.build_number, candidate)

    closest = closest_at_most(builds, build_number)
    if closest is None:
        logger.debug("No build of %s at or below %d", target, build_number)
        return None

    return builds[closest].raw
