"""
Utility helpers shared across BlazeSQL packages.
"""

from .logging import configure_logging, get_logger, log_statement

__all__ = ["configure_logging", "get_logger", "log_statement"]
