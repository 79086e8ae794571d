"""Session logging configuration.

Provides session-specific file logging for command failures and debug info.
Logs are written to ~/.termfolio/logs/<session-id>.log
"""
from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Optional

# Directory for log files
LOGS_DIR = Path.home() / ".termfolio" / "logs"

# Logger every termfolio module logs under
ROOT_LOGGER = "termfolio"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Module-level state
_console_handler: Optional[logging.StreamHandler] = None
_session_handler: Optional[logging.FileHandler] = None


def get_log_path(session_id: str, logs_dir: Optional[Path] = None) -> Path:
    """Get the log file path for a session, creating the directory."""
    directory = logs_dir or LOGS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"{session_id}.log"


def configure_console_logging(level: str = "WARNING") -> logging.Handler:
    """Send termfolio logs at ``level`` and above to stderr.

    The level sits on the stderr handler, so a session log file that
    records DEBUG does not leak debug lines onto the terminal.
    """
    global _console_handler

    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger(ROOT_LOGGER)
    if _console_handler is not None:
        root.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler()
    _console_handler.setLevel(numeric)
    _console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(_console_handler)

    floor = _session_handler.level if _session_handler is not None else numeric
    root.setLevel(min(numeric, floor))
    return _console_handler


def configure_session_logging(
    session_id: str,
    level: int = logging.DEBUG,
    logs_dir: Optional[Path] = None,
) -> Path:
    """Configure file logging for a terminal session.

    Sets up a file handler on the ``termfolio`` logger for the given
    session. Call this when starting a session.

    Args:
        session_id: The session ID (uses first 8 chars)
        level: Logging level for file output (default DEBUG)
        logs_dir: Override for the logs directory

    Returns:
        Path to the log file
    """
    global _session_handler

    short_id = session_id[:8]
    log_path = get_log_path(short_id, logs_dir)

    # Remove existing session handler if any
    close_session_logging()

    _session_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    _session_handler.setLevel(level)
    _session_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger(ROOT_LOGGER)
    root.addHandler(_session_handler)
    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)

    root.info(f"=== Session started: {session_id} ===")
    return log_path


def close_session_logging() -> None:
    """Flush and close the current session's log file, if any."""
    global _session_handler

    if _session_handler is not None:
        root = logging.getLogger(ROOT_LOGGER)
        root.info("=== Session ended ===")
        root.removeHandler(_session_handler)
        _session_handler.close()
        _session_handler = None


def log_exception(
    error: BaseException,
    context: str = "",
    include_traceback: bool = True,
) -> str:
    """Log an exception with full details to the session log.

    The log gets the traceback; the caller gets a short message fit
    for a terminal line.

    Args:
        error: The exception to log
        context: What was happening
        include_traceback: Whether to include the traceback in the log

    Returns:
        User-friendly error message (without traceback)
    """
    logger = logging.getLogger(ROOT_LOGGER)

    error_type = type(error).__name__
    error_msg = str(error) or error_type

    if context:
        user_msg = f"{context}: {error_msg}"
    else:
        user_msg = f"{error_type}: {error_msg}"

    if include_traceback:
        tb_str = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        log_msg = f"{context}\n{error_type}: {error_msg}\n\nTraceback:\n{tb_str}"
    else:
        log_msg = f"{context} - {error_type}: {error_msg}"

    logger.error(log_msg)
    return user_msg
