from __future__ import annotations

import io
import logging
from typing import Generator
from unittest.mock import patch

import pytest

import lnproto.utils.logger as logger_module
from lnproto.utils.logger import (
    ColoredFormatter,
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)


@pytest.fixture
def clean_logger_state() -> Generator[None, None, None]:
    """Reset the ``lnproto`` logger before and after each test."""
    root_logger = logging.getLogger("lnproto")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    logger_module._logging_configured = False

    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False


def _record(level: int = logging.WARNING, msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("lnproto.test", level, __file__, 1, msg, None, None)


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter."""

    def test_plain_when_color_disabled(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record()) == "WARNING: hello"

    def test_colors_level_on_tty(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            output = formatter.format(_record())

        assert output.startswith(ColoredFormatter.COLORS["WARNING"])
        assert ColoredFormatter.RESET in output

    def test_record_level_name_restored(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s")
        record = _record(logging.ERROR)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "ERROR"

    @pytest.mark.parametrize("variable", ["NO_COLOR", "CI"])
    def test_environment_disables_color(
        self, monkeypatch: pytest.MonkeyPatch, variable: str
    ) -> None:
        monkeypatch.setenv(variable, "1")

        assert ColoredFormatter._should_use_color() is False


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging and disable_logging."""

    def test_writes_to_stream(self, clean_logger_state: None) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.DEBUG, stream=stream)
        get_logger("core.normalizer").debug("normalized %s", "0.5.2")

        assert "normalized 0.5.2" in stream.getvalue()
        assert is_logging_configured() is True

    def test_level_filters_messages(self, clean_logger_state: None) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.WARNING, stream=stream)
        get_logger("x").info("hidden")
        get_logger("x").warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_repeated_setup_keeps_one_handler(self, clean_logger_state: None) -> None:
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger("lnproto").handlers) == 1

    def test_verbose_format_includes_logger_name(self, clean_logger_state: None) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.INFO, verbose=True, stream=stream)
        get_logger("config").info("loaded")

        assert "lnproto.config" in stream.getvalue()

    def test_disable_logging(self, clean_logger_state: None) -> None:
        stream = io.StringIO()
        setup_logging(stream=stream)

        disable_logging()
        get_logger("x").error("silenced")

        assert stream.getvalue() == ""
        assert is_logging_configured() is False
        root_logger = logging.getLogger("lnproto")
        assert all(isinstance(h, logging.NullHandler) for h in root_logger.handlers)


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger naming."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            (None, "lnproto"),
            ("", "lnproto"),
            ("lnproto", "lnproto"),
            ("core.selector", "lnproto.core.selector"),
            ("lnproto.core.selector", "lnproto.core.selector"),
        ],
    )
    def test_names_are_namespaced(self, name: object, expected: str) -> None:
        assert get_logger(name).name == expected  # type: ignore[arg-type]

    def test_library_default_has_null_handler(self, clean_logger_state: None) -> None:
        get_logger("anything")

        handlers = logging.getLogger("lnproto").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)
