# utils/logger.py
# This file is part of Redprint - Erlang trace message printing
#
# Logging utility for trace printing with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for trace printing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class RedprintLogger:
    """Centralized logger for Redprint diagnostics.

    Diagnostics go to stderr: stdout is reserved for the formatted trace
    reports themselves.
    """

    def __init__(self, name: str = "redprint", level: LogLevel = LogLevel.WARNING):
        """Initialize the Redprint logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(RedprintFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for trace printing events
    def message_passed_through(self, message: object):
        """Log a message the normalizer did not recognise."""
        self.debug(f"    ⏭️  Unrecognised trace message passed through: {message!r}")

    def stack_line_dropped(self, line: str):
        """Log a stack dump line that did not decode to a frame."""
        self.debug(f"      Dropped stack line: {line.strip()}")

    def options_ignored(self, keys):
        """Log option names that FormatOptions does not recognise."""
        names = ", ".join(sorted(repr(key) for key in keys))
        self.debug(f"    Ignoring unknown format options: {names}")

    def trace_summary(self, path: str, count: int):
        """Log the number of messages printed from a trace file."""
        self.info(f"📊 {count} trace message(s) printed from {path}")


class RedprintFormatter(logging.Formatter):
    """Custom formatter for Redprint logging with clean output."""

    def format(self, record):
        # INFO shows the message only (clean output)
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[RedprintLogger] = None


def get_logger(name: str = "redprint") -> RedprintLogger:
    """Get or create the global Redprint logger instance.

    Args:
        name: Logger name (default: "redprint")

    Returns:
        RedprintLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = RedprintLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
