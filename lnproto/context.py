"""
Shared context object for lnproto CLI commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from lnproto.config import LnProtoConfig
from lnproto.constants import CONFIG_FILE_NAME
from lnproto.core import ProtoCatalog, VersionResolver


class LnProtoContext:
    """Global context object for lnproto CLI commands.

    Attributes:
        config_path: Path to the lnproto configuration file, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration.
        proto_dir: Proto directory override from ``--proto-dir``.
    """

    __slots__ = ("config_path", "verbose", "color", "config", "proto_dir")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[LnProtoConfig] = None
        self.proto_dir: Optional[Path] = None

    def effective_proto_dir(self) -> Optional[Path]:
        """Return the proto directory to use: CLI, then config, then default."""
        if self.proto_dir is not None:
            return self.proto_dir
        if self.config is not None:
            return self.config.proto_dir
        return None

    def bundled_dir_hint(self) -> Optional[str]:
        """Return a hint for empty results when no proto directory was chosen.

        The wheel ships the ``proto/lnrpc`` directory without proto files, so
        an empty catalog usually means ``--proto-dir`` or ``proto_dir`` is
        missing.
        """
        if self.effective_proto_dir() is not None:
            return None
        return (
            "No proto directory configured; pass --proto-dir or set "
            f"proto_dir in {CONFIG_FILE_NAME}"
        )

    def build_catalog(self) -> ProtoCatalog:
        return ProtoCatalog(self.effective_proto_dir())

    def build_resolver(self) -> VersionResolver:
        """Return a resolver honoring the configured version bounds."""
        if self.config is None:
            return VersionResolver()
        return VersionResolver(self.config.bounds())


#: Click decorator for injecting :class:`LnProtoContext` into commands.
pass_context = click.make_pass_decorator(LnProtoContext, ensure=True)
