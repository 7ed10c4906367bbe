# Area: Shared
"""
Shared utilities used by the engine, the result log and the CLI.

This package contains:
- Logging configuration
"""

from .logging_config import setup_logging, TerminalFormatter, JSONFormatter

__all__ = [
    "setup_logging",
    "TerminalFormatter",
    "JSONFormatter",
]
