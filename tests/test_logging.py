"""
Tests for session logging.
"""

import logging

import pytest

from termfolio.logging import (
    ROOT_LOGGER,
    close_session_logging,
    configure_console_logging,
    configure_session_logging,
    log_exception,
)


@pytest.fixture
def session_log(tmp_path):
    path = configure_session_logging("abcdef1234567890", logs_dir=tmp_path)
    yield path
    close_session_logging()


def raise_and_catch():
    try:
        raise KeyError("missing")
    except KeyError as e:
        return e


class TestSessionLogging:
    """Tests for the per-session log file."""

    def test_log_file_named_by_short_id(self, session_log, tmp_path):
        assert session_log == tmp_path / "abcdef12.log"
        assert session_log.exists()

    def test_session_markers(self, session_log):
        logging.getLogger(f"{ROOT_LOGGER}.test").debug("inside the session")
        close_session_logging()

        text = session_log.read_text(encoding="utf-8")
        assert "=== Session started: abcdef1234567890 ===" in text
        assert "inside the session" in text
        assert "=== Session ended ===" in text

    def test_close_removes_handler(self, session_log):
        handlers = len(logging.getLogger(ROOT_LOGGER).handlers)
        close_session_logging()
        assert len(logging.getLogger(ROOT_LOGGER).handlers) == handlers - 1

    def test_reconfigure_replaces_handler(self, session_log, tmp_path):
        handlers = len(logging.getLogger(ROOT_LOGGER).handlers)
        configure_session_logging("0123456789", logs_dir=tmp_path)
        assert len(logging.getLogger(ROOT_LOGGER).handlers) == handlers
        assert (tmp_path / "01234567.log").exists()


class TestLogException:
    """Tests for log_exception."""

    def test_message_with_context(self, session_log):
        message = log_exception(RuntimeError("kaboom"), "Error executing command 'boom'")
        assert message == "Error executing command 'boom': kaboom"

    def test_message_without_context(self, session_log):
        assert log_exception(ValueError("bad")) == "ValueError: bad"

    def test_empty_message_uses_type(self, session_log):
        assert log_exception(RuntimeError(), "ctx") == "ctx: RuntimeError"

    def test_traceback_written(self, session_log):
        log_exception(raise_and_catch(), "lookup")
        close_session_logging()

        text = session_log.read_text(encoding="utf-8")
        assert "Traceback:" in text
        assert "raise_and_catch" in text


@pytest.fixture
def console():
    """Configure stderr logging and detach the handler afterwards."""
    root = logging.getLogger(ROOT_LOGGER)
    previous = root.level
    handlers = []

    def _configure(level):
        handler = configure_console_logging(level)
        handlers.append(handler)
        return handler

    yield _configure
    for handler in handlers:
        root.removeHandler(handler)
    root.setLevel(previous)


class TestConsoleLogging:
    """Tests for configure_console_logging."""

    def test_sets_handler_level(self, console):
        handler = console("info")
        assert handler.level == logging.INFO
        assert logging.getLogger(ROOT_LOGGER).level <= logging.INFO

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_console_logging("LOUD")

    def test_reconfigure_replaces_handler(self, console):
        first = console("warning")
        second = console("error")
        handlers = logging.getLogger(ROOT_LOGGER).handlers
        assert second in handlers
        assert first not in handlers

    def test_session_file_does_not_leak_debug(self, console, tmp_path, capsys):
        console("WARNING")
        path = configure_session_logging("feedface00", logs_dir=tmp_path)
        try:
            logger = logging.getLogger(f"{ROOT_LOGGER}.commands.registry")
            logger.debug("Dispatching ping with 0 args")
            logger.warning("store unreachable")
        finally:
            close_session_logging()

        err = capsys.readouterr().err
        assert "Dispatching ping" not in err
        assert "store unreachable" in err
        assert "Dispatching ping" in path.read_text(encoding="utf-8")

    def test_console_after_session_keeps_file_debug(self, console, tmp_path):
        path = configure_session_logging("beefcafe00", logs_dir=tmp_path)
        try:
            console("ERROR")
            logging.getLogger(f"{ROOT_LOGGER}.test").debug("still in the file")
        finally:
            close_session_logging()
        assert "still in the file" in path.read_text(encoding="utf-8")
