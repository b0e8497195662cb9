"""
Normalization of version strings reported by lnd.

``lnd --version`` and ``GetInfo`` report something like::

    0.5.2-beta commit=v0.5.2-beta-rc3-12-g3a5e8a2

The first token is a loose version. The second token is a ``git describe``
style description of the commit that carries more precision: the release
candidate, or the number of commits on top of a tag. This module extracts a
canonical semantic version from it, together with that commit count as a
build number when the description has one.

Normalization policy:

1. Split on whitespace into a version token and a commit token. Without a
   commit token the version token is returned unmodified.
2. The commit token must start with ``commit=``. The remainder is loosely
   coerced into semver (see :func:`~lnproto.utils.version_utils.coerce_version`).
3. Only the first three dash-separated segments are kept, dropping the
   trailing ``-<count>-g<hash>`` part.
4. The first prerelease identifier is split on ``-`` into separate
   identifiers, so ``beta-rc3`` becomes ``beta.rc3`` and matches file names
   such as ``0.5.2-beta.rc3``. When the first sub-token after any ``beta``
   marker is numeric it is a commit count: it becomes the build number and
   is removed from the prerelease. The remaining prerelease identifiers are
   kept.

Any failure in steps 2-4 falls back to the version token with a warning.
"""

from __future__ import annotations

from typing import List, Optional

from semantic_version import Version

from lnproto.utils.logger import get_logger
from lnproto.constants import BETA_MARKER, COMMIT_PREFIX, COMMIT_SEGMENTS
from lnproto.models.version import NormalizationOutcome, NormalizationResult
from lnproto.utils.version_utils import coerce_version, parse_version

logger = get_logger("core.normalizer")


def normalize(raw: str) -> NormalizationResult:
    """Normalize a version string reported by an lnd node.

    Never raises. When the commit description cannot be interpreted, the
    result has outcome :attr:`NormalizationOutcome.FALLBACK`, carries the
    first token verbatim and a warning is logged.

    Args:
        raw: Version string as reported by the node.

    Returns:
        The :class:`NormalizationResult`.

    Examples:
        >>> normalize("0.5.2-beta commit=v0.5.2-beta-rc3-12-g3a5e8a2").version
        '0.5.2-beta.rc3'
        >>> result = normalize("0.5.2 commit=abcdef-0.5.2-3")
        >>> result.version, result.build_number
        ('0.5.2', 3)
        >>> normalize("0.7.1-beta commit=v0.7.1-beta-12-gabc1234").full_version
        '0.7.1-beta+12'
        >>> normalize("0.5.2").version
        '0.5.2'
    """
    text = raw if isinstance(raw, str) else ""
    tokens = text.split()
    logger.debug("Testing version string: %r", text)

    if not tokens:
        return _fallback(text, "", "empty version string")

    version_token = tokens[0]
    if len(tokens) == 1:
        logger.debug("No commit description in %r, using it as is", text)
        return NormalizationResult(raw=text, version=version_token)

    commit_token = tokens[1]
    logger.debug(
        "Parsed version string into version: %s, commit: %s",
        version_token,
        commit_token,
    )

    if not commit_token.startswith(COMMIT_PREFIX):
        return _fallback(
            text,
            version_token,
            f"commit token {commit_token!r} lacks the {COMMIT_PREFIX!r} marker",
        )

    description = commit_token[len(COMMIT_PREFIX):]
    coerced = coerce_version(description)
    if coerced is None:
        return _fallback(
            text,
            version_token,
            f"commit description {description!r} is not a semantic version",
        )

    truncated = parse_version("-".join(str(coerced).split("-")[:COMMIT_SEGMENTS]))
    if truncated is None:
        return _fallback(
            text,
            version_token,
            f"cannot truncate {str(coerced)!r} to a semantic version",
        )

    prerelease: List[str] = list(truncated.prerelease)
    build_number: Optional[int] = None

    if prerelease:
        parts = prerelease[0].split("-")
        count = next((part for part in parts if part != BETA_MARKER), None)
        if count is not None and count.isdigit():
            build_number = int(count)
            parts.remove(count)
        prerelease = parts + prerelease[1:]

    try:
        canonical = Version(
            major=truncated.major,
            minor=truncated.minor,
            patch=truncated.patch,
            prerelease=tuple(prerelease),
        )
    except ValueError as exc:
        return _fallback(text, version_token, str(exc))

    result = NormalizationResult(
        raw=text,
        version=str(canonical),
        outcome=(
            NormalizationOutcome.BUILD
            if build_number is not None
            else NormalizationOutcome.VERSION
        ),
        build_number=build_number,
    )
    logger.debug("Determined semver as %s", result.full_version)
    return result


def _fallback(raw: str, version_token: str, reason: str) -> NormalizationResult:
    logger.warning("Unable to determine exact gRPC version from %r: %s", raw, reason)
    return NormalizationResult(
        raw=raw,
        version=version_token,
        outcome=NormalizationOutcome.FALLBACK,
        error=reason,
    )
