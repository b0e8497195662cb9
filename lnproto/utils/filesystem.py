"""
Filesystem utilities for lnproto.

Helpers for listing the proto directory and mapping version identifiers
back to paths inside it. All filesystem errors are normalized to
``FileOperationError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from lnproto.utils.logger import get_logger
from lnproto.exceptions import FileOperationError

logger = get_logger("filesystem")

PathLike = Union[str, Path]


def validate_directory(directory: PathLike) -> Path:
    """Resolve ``directory`` and ensure it is an existing directory."""
    path = Path(directory).expanduser()

    if not path.exists():
        raise FileOperationError(
            f"Directory not found: {path}",
            file_path=str(path),
            operation="list",
        )
    if not path.is_dir():
        raise FileOperationError(
            f"Not a directory: {path}",
            file_path=str(path),
            operation="list",
        )
    return path.resolve()


def list_files(
    directory: PathLike,
    *,
    suffix: Optional[str] = None,
) -> List[Path]:
    """List regular files directly inside ``directory``.

    Subdirectories are skipped. The result is in directory order, which is
    not guaranteed to be sorted.

    Args:
        directory: Directory to list.
        suffix: Only keep files whose name ends with this suffix.
    """
    root = validate_directory(directory)

    try:
        entries = list(root.iterdir())
    except OSError as exc:
        raise FileOperationError(
            f"Failed to list directory: {exc}",
            file_path=str(root),
            operation="list",
            original_error=exc,
        ) from exc

    files: List[Path] = []
    for entry in entries:
        if not entry.is_file():
            continue
        if suffix and not entry.name.endswith(suffix):
            logger.debug("Ignoring %s (expected suffix %s)", entry.name, suffix)
            continue
        files.append(entry)

    return files


def strip_suffix(name: str, suffix: Optional[str]) -> str:
    """Remove ``suffix`` from the end of ``name`` when present.

    Unlike :attr:`pathlib.PurePath.stem`, only the given suffix is
    removed, so ``0.5.2-beta.rc3.proto`` becomes ``0.5.2-beta.rc3``.
    """
    if suffix and name.endswith(suffix):
        return name[: -len(suffix)]
    return name


def validate_path(
    path: PathLike,
    *,
    base_dir: Optional[PathLike] = None,
) -> Path:
    """Resolve and validate a filesystem path.

    If ``base_dir`` is provided, the resolved path must be within it.
    """
    resolved = Path(path).expanduser().resolve(strict=False)

    if base_dir:
        base = Path(base_dir).expanduser().resolve(strict=False)
        try:
            resolved.relative_to(base)
        except ValueError:
            raise FileOperationError(
                f"Path outside allowed base directory: {resolved}",
                file_path=str(path),
                operation="validate",
            )

    return resolved
