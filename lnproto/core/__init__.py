"""
Core functionality exports for lnproto.

    from lnproto.core import VersionResolver, ProtoCatalog
"""

from __future__ import annotations

from lnproto.core.catalog import ProtoCatalog, default_proto_dir
from lnproto.core.normalizer import normalize
from lnproto.core.resolver import VersionResolver, resolve_closest_version
from lnproto.core.selector import select

__all__ = [
    "ProtoCatalog",
    "VersionResolver",
    "default_proto_dir",
    "normalize",
    "resolve_closest_version",
    "select",
]
