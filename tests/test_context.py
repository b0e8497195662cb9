from __future__ import annotations

from pathlib import Path

import click
import pytest
from click.testing import CliRunner
from semantic_version import Version

from lnproto.config import LnProtoConfig
from lnproto.context import LnProtoContext, pass_context
from lnproto.core import ProtoCatalog, VersionResolver, default_proto_dir


@pytest.mark.unit
class TestLnProtoContext:
    """Tests for LnProtoContext class."""

    def test_default_initialization(self) -> None:
        ctx = LnProtoContext()

        assert ctx.config_path is None
        assert ctx.verbose == 0
        assert ctx.color is True
        assert ctx.config is None
        assert ctx.proto_dir is None

    def test_slots_prevents_arbitrary_attributes(self) -> None:
        ctx = LnProtoContext()

        with pytest.raises(AttributeError):
            ctx.undefined = "value"  # type: ignore[attr-defined]

    def test_proto_dir_precedence(self, tmp_path: Path) -> None:
        ctx = LnProtoContext()
        assert ctx.effective_proto_dir() is None

        ctx.config = LnProtoConfig(proto_dir=tmp_path / "from-config")
        assert ctx.effective_proto_dir() == tmp_path / "from-config"

        ctx.proto_dir = tmp_path / "from-cli"
        assert ctx.effective_proto_dir() == tmp_path / "from-cli"

    def test_build_catalog_defaults_to_bundled_dir(self) -> None:
        catalog = LnProtoContext().build_catalog()

        assert isinstance(catalog, ProtoCatalog)
        assert catalog.base_path == default_proto_dir()

    def test_build_catalog_uses_override(self, tmp_path: Path) -> None:
        ctx = LnProtoContext()
        ctx.proto_dir = tmp_path

        assert ctx.build_catalog().base_path == tmp_path

    def test_bundled_dir_hint_without_proto_dir(self) -> None:
        hint = LnProtoContext().bundled_dir_hint()

        assert hint is not None
        assert "--proto-dir" in hint
        assert "proto_dir" in hint

    def test_no_bundled_dir_hint_with_proto_dir(self, tmp_path: Path) -> None:
        ctx = LnProtoContext()
        ctx.proto_dir = tmp_path

        assert ctx.bundled_dir_hint() is None

    def test_build_resolver_without_config(self) -> None:
        resolver = LnProtoContext().build_resolver()

        assert isinstance(resolver, VersionResolver)
        assert resolver.bounds.is_open

    def test_build_resolver_uses_configured_bounds(self) -> None:
        ctx = LnProtoContext()
        ctx.config = LnProtoConfig(lowest_version="0.5.1-beta")

        assert ctx.build_resolver().bounds.lowest == Version("0.5.1-beta")


@pytest.mark.unit
class TestPassContext:
    """Tests for the pass_context decorator."""

    def test_injects_context_object(self) -> None:
        seen = []

        @click.command()
        @pass_context
        def command(ctx: LnProtoContext) -> None:
            seen.append(ctx)

        result = CliRunner().invoke(command, [])

        assert result.exit_code == 0
        assert isinstance(seen[0], LnProtoContext)
