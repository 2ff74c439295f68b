"""
Social number generator.

Assembles sex digit, birth date, random segment and checksum into a
social number using a jurisdiction policy.
"""

import structlog

from social_numbers.domain.enums import SexType
from social_numbers.generators.checksum import checksum_matches, compute_checksum
from social_numbers.generators.policy import JurisdictionPolicy

logger = structlog.get_logger()


class SocialNumberGenerator:
    """
    Generates social numbers for one jurisdiction.

    Year, month and day are rendered without zero padding, so numbers are
    not fixed-width. Month and day are not range-checked.

    Usage:
        generator = SocialNumberGenerator(NortheriaPolicy())
        number = generator.generate(SexType.FEMALE, 2022, 12, 25)
    """

    def __init__(self, policy: JurisdictionPolicy, jurisdiction: str | None = None):
        """
        Initialize the generator.

        Args:
            policy: Jurisdiction policy supplying the encoding rules
            jurisdiction: Name the generator is registered under.
                          Defaults to the policy name.
        """
        self.policy = policy
        self.jurisdiction = jurisdiction or policy.name

    def generate(self, sex: SexType, year: int, month: int, day: int) -> str:
        """
        Generate a social number.

        Args:
            sex: Sex of the holder
            year: Birth year
            month: Birth month
            day: Birth day

        Returns:
            Social number string
        """
        digits = (
            f"{self.policy.sex_digit(sex)}"
            f"{year}{month}{day}"
            f"{self.policy.random_segment(year, month, day)}"
        )
        checksum = compute_checksum(digits, self.policy.modulo())
        number = f"{digits}{checksum}"

        logger.debug(
            "social_number_generated",
            jurisdiction=self.jurisdiction,
            sex=sex.value,
            number=number,
        )
        return number

    def verify(self, identifier: str) -> bool:
        """
        Check the trailing checksum of a social number.

        Args:
            identifier: Social number to check

        Returns:
            True if the checksum is consistent with the preceding digits
        """
        return checksum_matches(identifier, self.policy.modulo())
