# utils/__init__.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Utility module exports

from .logger import (
    LogLevel,
    SATLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "SATLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
