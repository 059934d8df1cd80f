"""Unit tests for unify4py.logging."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from unify4py.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

# pylint: disable=redefined-outer-name, magic-value-comparison


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("logger_name", "prefix"),
    [
        ("click_extra.colorize", "[click_extra] "),
        ("urllib3", "[urllib3] "),
        ("unify4py.entrypoints.cli.sets", ""),
        ("unify4py", ""),
    ],
)
def test_prefix_filter(logger_name, prefix):
    """Only records from other packages get a bracketed prefix."""
    record = _record(logger_name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix  # type: ignore[attr-defined]


def test_console_handler_levels():
    """The requested level is used unless debug mode forces DEBUG."""
    handler = config_console_handler(level=logging.ERROR)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.ERROR
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)

    debug_handler = config_console_handler(level=logging.ERROR, debug_mode=True)
    assert debug_handler.level == logging.DEBUG
    assert not debug_handler.filters


@pytest.fixture
def recorder_logger():
    """A non-propagating logger for attaching a flight recorder in isolation."""
    logger = logging.getLogger("unify4py.tests.recorder")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
        if isinstance(handler, MemoryHandler) and handler.target is not None:
            handler.target.close()


def test_flight_recorder_buffers_until_warning(recorder_logger, tmp_path):
    """Records stay in memory until a WARNING arrives, then all are written."""
    path = tmp_path / "recorder.log"
    handler = config_flight_recorder(path, capacity=100)
    assert isinstance(handler, MemoryHandler)
    recorder_logger.addHandler(handler)

    recorder_logger.debug("Loaded 2 element(s), 2 distinct, from a.txt")
    assert path.read_text(encoding="utf-8") == ""

    recorder_logger.warning("empty.txt holds no elements")
    content = path.read_text(encoding="utf-8")
    assert "DEBUG    unify4py.tests.recorder" in content
    assert "Loaded 2 element(s)" in content
    assert "empty.txt holds no elements" in content


def test_flight_recorder_creates_parent_directory(recorder_logger, tmp_path):
    """A missing parent directory of the log path is created."""
    path = tmp_path / "nested" / "dir" / "recorder.log"
    recorder_logger.addHandler(config_flight_recorder(path))
    assert path.exists()


def test_log_startup_describes_handlers(recorder_logger, tmp_path, caplog):
    """The summary names the command and the recorder file is described."""
    recorder = config_flight_recorder(tmp_path / "run.log", capacity=10)
    recorder_logger.addHandler(recorder)
    recorder_logger.propagate = True
    console = config_console_handler(level=logging.INFO)

    with caplog.at_level(logging.DEBUG, logger="unify4py.tests.recorder"):
        log_startup(
            recorder_logger,
            app_version="9.9.9",
            command="set",
            level=logging.INFO,
            handlers=[console, recorder],
            logger_levels={"click_extra": logging.WARNING},
        )

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == (
        "UNIFY 9.9.9 - console=INFO, flight-recorder=ON, command=set"
    )
    assert "Handler: RichHandler at INFO" in messages
    assert any(
        m.startswith("Handler: flight recorder -> ")
        and m.endswith("run.log (capacity=10, flush_on_close=False)")
        for m in messages
    )
    assert "Element types: str, int, float (default str)" in messages
    assert "Logger levels: click_extra=WARNING" in messages


def test_log_startup_without_recorder(caplog):
    """Without a MemoryHandler the summary reports the recorder as OFF."""
    logger = logging.getLogger("unify4py.tests.startup")
    with caplog.at_level(logging.INFO, logger="unify4py.tests.startup"):
        log_startup(
            logger,
            app_version="1.0.0",
            command=None,
            level=logging.WARNING,
            handlers=[config_console_handler()],
            logger_levels={},
        )
    assert caplog.records[0].getMessage() == (
        "UNIFY 1.0.0 - console=WARNING, flight-recorder=OFF, command=<none>"
    )
