"""
Jurisdiction policies for Social Numbers.

A policy supplies the jurisdiction-specific parts of a social number: the
sex digit, the random segment and the checksum modulus.
"""

from abc import ABC, abstractmethod

import numpy as np
import structlog
from numpy.random import Generator as RNG

from social_numbers.domain.enums import SexType

logger = structlog.get_logger()


class JurisdictionPolicy(ABC):
    """
    Abstract base class for jurisdiction encoding rules.

    Each policy owns its random number generator and a cache mapping a
    date key to the last random segment issued for that date. A newly drawn
    segment is rejected while it equals any cached value, so two consecutive
    numbers for the same date never share a segment.

    Not safe for concurrent use; give each thread its own policy.

    Usage:
        class MyPolicy(JurisdictionPolicy):
            name = "mine"
            segment_min = 100
            segment_max = 999
            ...
    """

    name: str = ""
    segment_min: int = 0
    segment_max: int = 0

    def __init__(self, rng: RNG | None = None):
        """
        Initialize the policy.

        Args:
            rng: NumPy random number generator. Seeded from OS entropy
                 when omitted.
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.cache: dict[int, int] = {}

    @abstractmethod
    def sex_digit(self, sex: SexType) -> int:
        """Return the leading digit encoding the given sex."""
        pass

    @abstractmethod
    def date_key(self, year: int, month: int, day: int) -> int:
        """Return the cache key for a birth date."""
        pass

    @abstractmethod
    def modulo(self) -> int:
        """Return the checksum modulus."""
        pass

    def random_segment(self, year: int, month: int, day: int) -> int:
        """
        Draw the random segment for a birth date.

        Redraws until the value is not among the cached values, then
        records it as the latest value for the date.

        Args:
            year: Birth year
            month: Birth month
            day: Birth day

        Returns:
            Integer in [segment_min, segment_max]
        """
        key = self.date_key(year, month, day)
        issued = set(self.cache.values())

        while True:
            number = int(self.rng.integers(self.segment_min, self.segment_max + 1))
            if number not in issued:
                break
            logger.debug(
                "segment_collision",
                jurisdiction=self.name,
                date_key=key,
                segment=number,
            )

        self.cache[key] = number
        return number


class NortheriaPolicy(JurisdictionPolicy):
    """Encoding rules for Northeria: 5-digit segment, sex digits 9/7."""

    name = "northeria"
    segment_min = 10000
    segment_max = 99999

    def sex_digit(self, sex: SexType) -> int:
        if sex == SexType.FEMALE:
            return 9
        return 7

    def date_key(self, year: int, month: int, day: int) -> int:
        return year * 10000 + month * 100 + day

    def modulo(self) -> int:
        return 11


class SoutheriaPolicy(JurisdictionPolicy):
    """Encoding rules for Southeria: 4-digit segment, sex digits 1/2."""

    name = "southeria"
    segment_min = 1000
    segment_max = 9999

    def sex_digit(self, sex: SexType) -> int:
        if sex == SexType.FEMALE:
            return 1
        return 2

    def date_key(self, year: int, month: int, day: int) -> int:
        return year * 1000 + month * 100 + day

    def modulo(self) -> int:
        return 11
