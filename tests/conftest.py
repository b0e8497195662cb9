from __future__ import annotations

from pathlib import Path
from typing import Generator, List

import pytest

from lnproto.utils.console import reconfigure_console
from lnproto.utils.logger import disable_logging


@pytest.fixture(autouse=True)
def reset_output_state() -> Generator[None, None, None]:
    """Undo CLI logging and console setup between tests."""
    yield
    disable_logging()
    reconfigure_console()


@pytest.fixture
def proto_dir(tmp_path: Path) -> Path:
    """Create a proto directory holding a small, unsorted catalog."""
    directory = tmp_path / "protos"
    directory.mkdir()

    versions: List[str] = [
        "0.5.2-beta.rc3",
        "0.5.0",
        "0.5.1-beta.rc2",
        "0.5.1-beta.rc1",
    ]
    for version in versions:
        (directory / f"{version}.proto").write_text("syntax = \"proto3\";\n")

    return directory
