"""
Utility modules for Social Numbers.
"""

from social_numbers.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
