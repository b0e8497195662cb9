"""
Semantic version helpers for lnproto.

Strict parsing is used for catalog entries, which are expected to be
well-formed file stems. Loose coercion is used for text reported by a
remote lnd node, which routinely carries a leading ``v``, a commit hash in
front of the version, or non-standard prerelease tagging.

All helpers return ``None`` instead of raising on bad input.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from semantic_version import Version

# A dotted numeric run not glued to a preceding word, e.g. the ``0.5.1`` in
# ``abcdef-0.5.1-beta.rc2``. At least one dot is required so that a commit
# hash made only of digits (``1234567``) is never taken for a major version.
_EMBEDDED_VERSION_RE = re.compile(r"(?<![0-9A-Za-z.])[v=]*(\d+\.\d+(?:\.\d+)?)")


def parse_version(value: object) -> Optional[Version]:
    """Parse ``value`` as a strict semantic version.

    Examples:
        >>> parse_version("0.5.2-beta.rc3")
        Version('0.5.2-beta.rc3')
        >>> parse_version("0.5") is None
        True
    """
    if not isinstance(value, str):
        return None
    try:
        return Version(value.strip())
    except ValueError:
        return None


def coerce_version(value: object) -> Optional[Version]:
    """Loosely coerce ``value`` into a semantic version.

    Leading ``v``/``=`` characters are dropped, text in front of the first
    dotted numeric run is skipped, a missing patch component is
    zero-filled and characters that are illegal in semver are replaced by
    ``-``.

    Examples:
        >>> coerce_version("v0.5.2-beta-rc3-12-g3a5e8a2")
        Version('0.5.2-beta-rc3-12-g3a5e8a2')
        >>> coerce_version("abcdef-0.5.1-beta.rc2")
        Version('0.5.1-beta.rc2')
        >>> coerce_version("abcdef") is None
        True
        >>> coerce_version("1234567-0.5.1-beta.rc2")
        Version('0.5.1-beta.rc2')
    """
    if not isinstance(value, str):
        return None

    cleaned = value.strip().lstrip("=v").strip()
    if not cleaned:
        return None

    match = _EMBEDDED_VERSION_RE.search(cleaned)
    if match is None:
        return None
    cleaned = cleaned[match.start(1):]

    try:
        return Version.coerce(cleaned)
    except ValueError:
        return None


def strip_build(version: Version) -> Version:
    """Return ``version`` without its build metadata."""
    return Version(
        major=version.major,
        minor=version.minor,
        patch=version.patch,
        prerelease=version.prerelease,
    )


def numeric_build(version: Version) -> Optional[int]:
    """Return the build metadata of ``version`` as an integer.

    Only a single purely numeric identifier qualifies: ``0.5.2+7`` yields
    ``7`` while ``0.5.2+7.1`` and ``0.5.2+abc`` yield ``None``.
    """
    build = version.build or ()
    if len(build) != 1 or not build[0].isdigit():
        return None
    return int(build[0])


def closest_at_most(values: Iterable[int], target: int) -> Optional[int]:
    """Return the value closest to ``target`` without exceeding it.

    Examples:
        >>> closest_at_most({1, 3, 7, 10}, 8)
        7
        >>> closest_at_most({5, 9}, 3) is None
        True
    """
    best: Optional[int] = None
    for value in values:
        if value > target:
            continue
        if best is None or target - value < target - best:
            best = value
    return best
