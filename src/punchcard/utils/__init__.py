"""Utility functions for punchcard.

This module provides utility functions including:

- Logging setup and configuration
"""

from punchcard.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
