"""Shared utility functions.

Key modules:
    - logging: Logging configuration
    - protocols: Protocol definitions for dependency injection
"""

from .logging import configure_logging, get_logger
from .protocols import ReporterProtocol

__all__ = [
    "configure_logging",
    "get_logger",
    "ReporterProtocol",
]
