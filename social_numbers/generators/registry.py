"""
Generator registry for Social Numbers.

Maps jurisdiction names to social number generators. This is the entry
point for callers.
"""

import numpy as np
import structlog

from social_numbers.config.models import GeneratorConfig
from social_numbers.generators.number_generator import SocialNumberGenerator
from social_numbers.generators.policy import (
    JurisdictionPolicy,
    NortheriaPolicy,
    SoutheriaPolicy,
)

logger = structlog.get_logger()


class InvalidJurisdictionError(Exception):
    """Raised when a jurisdiction name is not registered."""

    pass


DEFAULT_POLICIES: tuple[type[JurisdictionPolicy], ...] = (
    NortheriaPolicy,
    SoutheriaPolicy,
)


class GeneratorRegistry:
    """
    Owns one generator per supported jurisdiction.

    Policies are constructed eagerly. Each policy gets its own RNG; with a
    seed the RNGs are spawned from a single SeedSequence so runs are
    reproducible, otherwise they are seeded from OS entropy.

    Usage:
        registry = GeneratorRegistry()
        number = registry.get_generator("northeria").generate(
            SexType.FEMALE, 2022, 12, 25
        )
    """

    def __init__(self, seed: int | None = None):
        """
        Initialize the registry.

        Args:
            seed: Optional base seed for reproducible output
        """
        self.seed = seed
        self._generators: dict[str, SocialNumberGenerator] = {}

        seed_seq = np.random.SeedSequence(seed)
        for policy_cls, child_seed in zip(
            DEFAULT_POLICIES, seed_seq.spawn(len(DEFAULT_POLICIES))
        ):
            self.register(policy_cls.name, policy_cls(np.random.default_rng(child_seed)))

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "GeneratorRegistry":
        """Create a registry from configuration."""
        return cls(seed=config.seed)

    def register(self, name: str, policy: JurisdictionPolicy) -> SocialNumberGenerator:
        """
        Register a jurisdiction, replacing any existing entry of that name.

        Args:
            name: Jurisdiction name used for lookup
            policy: Encoding rules for the jurisdiction

        Returns:
            Generator bound to the policy
        """
        generator = SocialNumberGenerator(policy, jurisdiction=name)
        self._generators[name] = generator
        logger.debug("jurisdiction_registered", jurisdiction=name)
        return generator

    def get_generator(self, name: str) -> SocialNumberGenerator:
        """
        Look up the generator for a jurisdiction.

        Names are matched exactly and case-sensitively.

        Args:
            name: Jurisdiction name, e.g. "northeria"

        Returns:
            Generator for the jurisdiction

        Raises:
            InvalidJurisdictionError: If the name is not registered
        """
        try:
            return self._generators[name]
        except KeyError:
            raise InvalidJurisdictionError(f"invalid jurisdiction: {name}") from None

    @property
    def jurisdictions(self) -> list[str]:
        """Registered jurisdiction names, sorted."""
        return sorted(self._generators)

    def __contains__(self, name: object) -> bool:
        return name in self._generators
