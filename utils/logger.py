# utils/logger.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Logging utility for formula processing with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class BooleLogger:
    """Centralized logger for formula processing with structured output."""

    def __init__(self, name: str = "boole_rpn", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        # Progress goes to stdout, warnings and errors to stderr so they never
        # interleave with printed results.
        progress_handler = ConsoleHandler("stdout")
        progress_handler.addFilter(lambda record: record.levelno < logging.WARNING)

        problem_handler = ConsoleHandler("stderr")
        problem_handler.addFilter(lambda record: record.levelno >= logging.WARNING)

        for handler in (progress_handler, problem_handler):
            handler.setLevel(level.value)
            handler.setFormatter(BooleFormatter())
            self.logger.addHandler(handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    @property
    def level(self) -> int:
        return self.logger.level

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
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

    # Specialized methods for formula processing events
    def formula_parsed(self, source: str, root_type: str):
        """Log a successful parse."""
        self.debug(f"Parsed '{source}' into {root_type}")

    def transform_result(self, form: str, source: str, result: str):
        """Log the outcome of a normal form conversion."""
        self.debug(f"{form}: {source} -> {result}")

    def truth_table_summary(self, variables: str, row_count: int):
        """Log the size of a generated truth table."""
        self.debug(f"Truth table over [{variables}] with {row_count} row(s)")

    def invalid_formula(self, source: str, reason: str):
        """Log a formula rejected at the caller boundary."""
        self.warning(f"Invalid expression '{source}': {reason}")


class ConsoleHandler(logging.StreamHandler):
    """Stream handler bound to ``sys.stdout`` or ``sys.stderr`` by name.

    The stream is looked up on every write, so redirection of the standard
    streams after the logger was created is honoured.
    """

    def __init__(self, stream_name: str):
        self.stream_name = stream_name
        super().__init__()

    @property
    def stream(self):
        return getattr(sys, self.stream_name)

    @stream.setter
    def stream(self, value):
        # Fixed by name
        pass


class BooleFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level, show message only (clean output)
        if record.levelno == logging.INFO:
            return record.getMessage()

        # For DEBUG level, show with level indicator
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[BooleLogger] = None


def get_logger(name: str = "boole_rpn") -> BooleLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "boole_rpn")

    Returns:
        BooleLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = BooleLogger(name)
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
