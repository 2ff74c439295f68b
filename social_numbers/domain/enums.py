"""
Enumeration types for Social Numbers domain models.
"""

from enum import Enum


class SexType(str, Enum):
    """Sex encoded in the leading digit of a social number."""
    FEMALE = "Female"
    MALE = "Male"

    @classmethod
    def from_string(cls, value: str) -> "SexType":
        """
        Resolve a sex from a case-insensitive name or value.

        Args:
            value: e.g. "female", "MALE", "Female"

        Returns:
            Matching SexType

        Raises:
            ValueError: If the value matches no member
        """
        normalized = value.strip().lower()
        for member in cls:
            if normalized in (member.name.lower(), member.value.lower()):
                return member
        raise ValueError(f"Unknown sex: {value}")
