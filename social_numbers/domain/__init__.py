"""
Domain types for Social Numbers.
"""

from social_numbers.domain.enums import SexType

__all__ = [
    "SexType",
]
