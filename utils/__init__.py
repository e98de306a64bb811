# utils/__init__.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Utility module exports

from .logger import (
    LogLevel,
    BooleLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "BooleLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
