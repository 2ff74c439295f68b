"""
Social number generators.

Provides the checksum, jurisdiction policies, the number generator and the
registry resolving jurisdiction names.
"""

from social_numbers.generators.checksum import checksum_matches, compute_checksum
from social_numbers.generators.policy import (
    JurisdictionPolicy,
    NortheriaPolicy,
    SoutheriaPolicy,
)
from social_numbers.generators.number_generator import SocialNumberGenerator
from social_numbers.generators.registry import (
    GeneratorRegistry,
    InvalidJurisdictionError,
)

__all__ = [
    "checksum_matches",
    "compute_checksum",
    "JurisdictionPolicy",
    "NortheriaPolicy",
    "SoutheriaPolicy",
    "SocialNumberGenerator",
    "GeneratorRegistry",
    "InvalidJurisdictionError",
]
