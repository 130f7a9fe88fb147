"""Shared utility modules.

- logging: JSON-formatted file logging plus rich console output
"""

from .logging import JSONFormatter, remove_handlers, setup_logging

__all__ = [
    "JSONFormatter",
    "setup_logging",
    "remove_handlers",
]
