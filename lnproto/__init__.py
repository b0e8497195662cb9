"""
lnproto: lnd rpc.proto files and version matching.

lnproto keeps a directory of versioned ``rpc.proto`` files and picks the
one that best matches the version string reported by an lnd node::

    >>> from lnproto import resolve_closest_version
    >>> resolve_closest_version(
    ...     "0.5.2 commit=abcdef-0.5.2-3",
    ...     ["0.5.2", "0.5.2+1", "0.5.2+5"],
    ... )
    '0.5.2+1'
"""

from __future__ import annotations

from lnproto.__version__ import __version__
from lnproto.core import (
    ProtoCatalog,
    VersionResolver,
    default_proto_dir,
    normalize,
    resolve_closest_version,
    select,
)
from lnproto.models import (
    Candidate,
    NormalizationOutcome,
    NormalizationResult,
    VersionBounds,
)
from lnproto.utils.version_utils import closest_at_most

__author__ = "lnproto Contributors"
__license__ = "MIT"
__description__ = "lnd rpc.proto files and utilities for matching them to lnd versions."

__all__ = [
    "__version__",
    "Candidate",
    "NormalizationOutcome",
    "NormalizationResult",
    "ProtoCatalog",
    "VersionBounds",
    "VersionResolver",
    "closest_at_most",
    "default_proto_dir",
    "normalize",
    "resolve_closest_version",
    "select",
]
