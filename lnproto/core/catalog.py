"""
Catalog of protocol-definition files on disk.

Every ``<version>.proto`` file in a directory is one catalog entry,
identified by its name without the suffix. File contents are never read.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional, Union

from lnproto.constants import PROTO_SUBDIR, PROTO_SUFFIX
from lnproto.core.resolver import VersionResolver
from lnproto.utils.logger import get_logger
from lnproto.utils.filesystem import list_files, strip_suffix, validate_path

logger = get_logger("core.catalog")


def default_proto_dir() -> Path:
    """Return the proto directory shipped inside the package."""
    return Path(__file__).resolve().parent.parent.joinpath(*PROTO_SUBDIR)


class ProtoCatalog:
    """Versioned proto files stored in a single directory.

    Args:
        base_path: Directory holding the proto files. Defaults to
            :func:`default_proto_dir`.
        suffix: File suffix of catalog entries.
    """

    def __init__(
        self,
        base_path: Optional[Union[str, Path]] = None,
        *,
        suffix: str = PROTO_SUFFIX,
    ) -> None:
        self.base_path = Path(base_path) if base_path is not None else default_proto_dir()
        self.suffix = suffix

    def __repr__(self) -> str:
        return f"ProtoCatalog(base_path={str(self.base_path)!r}, suffix={self.suffix!r})"

    def list_files(self) -> List[Path]:
        """Return the paths of all proto files in the catalog."""
        return list_files(self.base_path, suffix=self.suffix)

    def list_versions(self) -> List[str]:
        """Return the version identifiers of all proto files, unsorted."""
        versions = [strip_suffix(path.name, self.suffix) for path in self.list_files()]
        logger.debug("Found %d proto versions in %s", len(versions), self.base_path)
        return versions

    async def alist_versions(self) -> List[str]:
        """Asynchronous variant of :meth:`list_versions`."""
        return await asyncio.to_thread(self.list_versions)

    def resolve_file_path(self, version: str) -> Path:
        """Map a version identifier to its proto file path.

        The file is not required to exist, but the path must stay inside
        the catalog directory.
        """
        return validate_path(
            self.base_path / f"{version}{self.suffix}",
            base_dir=self.base_path,
        )

    def latest_version(self, resolver: Optional[VersionResolver] = None) -> Optional[str]:
        return (resolver or VersionResolver()).latest(self.list_versions())

    def latest_file(self, resolver: Optional[VersionResolver] = None) -> Optional[Path]:
        """Return the path of the newest proto file, if any."""
        version = self.latest_version(resolver)
        return self.resolve_file_path(version) if version is not None else None

    async def closest_version(
        self,
        raw: str,
        resolver: Optional[VersionResolver] = None,
    ) -> Optional[str]:
        """Return the catalog version closest to an lnd version string."""
        versions = await self.alist_versions()
        return (resolver or VersionResolver()).closest(raw, versions)

    async def closest_file(
        self,
        raw: str,
        resolver: Optional[VersionResolver] = None,
    ) -> Optional[Path]:
        """Return the proto file closest to an lnd version string."""
        version = await self.closest_version(raw, resolver)
        return self.resolve_file_path(version) if version is not None else None
