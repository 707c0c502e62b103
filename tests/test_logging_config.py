"""Tests for the logging setup."""

import logging
from contextlib import contextmanager

from coaster_api.app.core.logging_config import UVICORN_LOGGERS, setup_logging


@contextmanager
def bare_root_logger():
    """Run with no root handlers, restoring pytest's own afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_console_and_file_handlers(tmp_path):
    logfile = tmp_path / "logs" / "coasters.log"

    with bare_root_logger() as root:
        setup_logging("debug", str(logfile))
        logging.getLogger("coaster_api.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        level, handler_count = root.level, len(root.handlers)

    assert level == logging.DEBUG
    assert handler_count == 2
    assert "[INFO] coaster_api.test: hello" in logfile.read_text(encoding="utf-8")


def test_uvicorn_loggers_propagate_to_root():
    logging.getLogger("uvicorn.access").addHandler(logging.NullHandler())

    with bare_root_logger():
        setup_logging("info")

    for name in UVICORN_LOGGERS:
        assert logging.getLogger(name).handlers == []
        assert logging.getLogger(name).propagate is True


def test_second_call_keeps_existing_handlers():
    with bare_root_logger() as root:
        setup_logging("warning")
        setup_logging("debug", "ignored.log")
        level, handler_count = root.level, len(root.handlers)

    assert handler_count == 1
    assert level == logging.WARNING
