# utils/logger.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Logging utility for formula parsing and solving with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the solver."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class SATLogger:
    """Centralized logger for the solver with structured, clean output."""

    def __init__(self, name: str = "boolsat", level: LogLevel = LogLevel.INFO):
        """Initialize the solver logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(SATFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> int:
        return self.logger.level

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

    # Specialized methods for parsing and search events
    def formula_parsed(self, expr, variable_names):
        """Log a successfully parsed formula and its variables.

        The tree is only converted to text when DEBUG output is enabled.
        """
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        names = ", ".join(variable_names) if variable_names else "none"
        self.debug(f"Parsed formula {expr} with variables: {names}")

    def search_started(self, variable_count: int, total: int):
        """Log the start of an exhaustive search."""
        self.debug(
            f"Enumerating {total} assignment(s) over {variable_count} variable(s)"
        )

    def solution_found(self, code: int, count: int):
        """Log a satisfying assignment."""
        self.debug(f"    Solution #{count} at assignment {code:#b}")

    def search_finished(self, verdict: str, count: int):
        """Log the end of a search."""
        self.debug(f"Search finished: {verdict} with {count} solution(s)")


class SATFormatter(logging.Formatter):
    """Custom formatter for solver logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[SATLogger] = None


def get_logger(name: str = "boolsat") -> SATLogger:
    """Get or create the global solver logger instance.

    Args:
        name: Logger name (default: "boolsat")

    Returns:
        SATLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = SATLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(debug: bool = False):
    """Configure logging based on command line flags.

    Results are reported at INFO, so INFO stays enabled without flags.

    Args:
        debug: Enable debug output
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    else:
        set_log_level(LogLevel.INFO)
