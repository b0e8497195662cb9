"""Unit tests for lnproto.core.catalog."""

from __future__ import annotations

from pathlib import Path

import pytest

from lnproto.core.catalog import ProtoCatalog, default_proto_dir
from lnproto.core.resolver import VersionResolver
from lnproto.exceptions import FileOperationError
from lnproto.models import VersionBounds


@pytest.mark.unit
class TestProtoCatalogListing:
    """Tests for listing the proto directory."""

    def test_list_versions(self, proto_dir: Path) -> None:
        catalog = ProtoCatalog(proto_dir)

        assert sorted(catalog.list_versions()) == [
            "0.5.0",
            "0.5.1-beta.rc1",
            "0.5.1-beta.rc2",
            "0.5.2-beta.rc3",
        ]

    def test_directories_and_other_files_skipped(self, proto_dir: Path) -> None:
        (proto_dir / "0.9.0.proto").mkdir()
        (proto_dir / "README.md").write_text("docs")

        versions = ProtoCatalog(proto_dir).list_versions()

        assert "0.9.0" not in versions
        assert "README.md" not in versions
        assert len(versions) == 4

    def test_build_numbered_files(self, proto_dir: Path) -> None:
        (proto_dir / "0.5.2+3.proto").write_text("")

        assert "0.5.2+3" in ProtoCatalog(proto_dir).list_versions()

    def test_list_files_returns_paths(self, proto_dir: Path) -> None:
        files = ProtoCatalog(proto_dir).list_files()

        assert len(files) == 4
        assert all(path.suffix == ".proto" for path in files)
        assert all(path.parent == proto_dir.resolve() for path in files)

    def test_custom_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "0.5.0.txt").write_text("")
        (tmp_path / "0.5.1.proto").write_text("")

        assert ProtoCatalog(tmp_path, suffix=".txt").list_versions() == ["0.5.0"]

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileOperationError) as exc_info:
            ProtoCatalog(tmp_path / "missing").list_versions()

        assert "not found" in str(exc_info.value).lower()

    def test_file_instead_of_directory_raises(self, tmp_path: Path) -> None:
        target = tmp_path / "file.proto"
        target.write_text("")

        with pytest.raises(FileOperationError):
            ProtoCatalog(target).list_versions()

    @pytest.mark.asyncio
    async def test_alist_versions(self, proto_dir: Path) -> None:
        versions = await ProtoCatalog(proto_dir).alist_versions()

        assert sorted(versions) == sorted(ProtoCatalog(proto_dir).list_versions())


@pytest.mark.unit
class TestProtoCatalogPaths:
    """Tests for mapping versions back to files."""

    def test_default_base_path(self) -> None:
        catalog = ProtoCatalog()

        assert catalog.base_path == default_proto_dir()
        assert default_proto_dir().parts[-2:] == ("proto", "lnrpc")

    def test_resolve_file_path(self, proto_dir: Path) -> None:
        path = ProtoCatalog(proto_dir).resolve_file_path("0.5.0")

        assert path == (proto_dir / "0.5.0.proto").resolve()

    def test_resolve_file_path_does_not_require_existence(self, proto_dir: Path) -> None:
        path = ProtoCatalog(proto_dir).resolve_file_path("9.9.9")

        assert path.name == "9.9.9.proto"

    def test_resolve_file_path_rejects_traversal(self, proto_dir: Path) -> None:
        with pytest.raises(FileOperationError):
            ProtoCatalog(proto_dir).resolve_file_path("../../etc/passwd")

    def test_repr(self, proto_dir: Path) -> None:
        assert "ProtoCatalog(base_path=" in repr(ProtoCatalog(proto_dir))


@pytest.mark.unit
class TestProtoCatalogResolution:
    """Tests for the latest/closest convenience wrappers."""

    def test_latest_version(self, proto_dir: Path) -> None:
        assert ProtoCatalog(proto_dir).latest_version() == "0.5.2-beta.rc3"

    def test_latest_version_with_bounds(self, proto_dir: Path) -> None:
        resolver = VersionResolver(VersionBounds.from_strings(highest="0.5.1"))

        assert ProtoCatalog(proto_dir).latest_version(resolver) == "0.5.1-beta.rc2"

    def test_latest_file(self, proto_dir: Path) -> None:
        path = ProtoCatalog(proto_dir).latest_file()

        assert path == (proto_dir / "0.5.2-beta.rc3.proto").resolve()

    def test_latest_file_empty_directory(self, tmp_path: Path) -> None:
        assert ProtoCatalog(tmp_path).latest_file() is None

    @pytest.mark.asyncio
    async def test_closest_version(self, proto_dir: Path) -> None:
        catalog = ProtoCatalog(proto_dir)

        match = await catalog.closest_version("0.5.1-beta commit=abcdef-0.5.1-beta.rc2")

        assert match == "0.5.1-beta.rc2"

    @pytest.mark.asyncio
    async def test_closest_file(self, proto_dir: Path) -> None:
        catalog = ProtoCatalog(proto_dir)

        path = await catalog.closest_file("0.5.2-beta commit=v0.5.2-beta-rc3-12-g3a5e8a2")

        assert path == (proto_dir / "0.5.2-beta.rc3.proto").resolve()

    @pytest.mark.asyncio
    async def test_closest_file_none_when_too_old(self, proto_dir: Path) -> None:
        path = await ProtoCatalog(proto_dir).closest_file("0.4.0-beta commit=v0.4.0-beta")

        assert path is None
