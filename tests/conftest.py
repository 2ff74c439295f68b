"""
Shared test fixtures for Social Numbers tests.
"""

import os

import numpy as np
import pytest

from social_numbers.generators.number_generator import SocialNumberGenerator
from social_numbers.generators.policy import NortheriaPolicy, SoutheriaPolicy
from social_numbers.generators.registry import GeneratorRegistry


# =============================================================================
# RNG Fixtures
# =============================================================================


@pytest.fixture
def test_seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def test_rng(test_seed: int) -> np.random.Generator:
    """Deterministic random number generator."""
    return np.random.default_rng(test_seed)


# =============================================================================
# Generator Fixtures
# =============================================================================


@pytest.fixture
def registry(test_seed: int) -> GeneratorRegistry:
    """Seeded registry with the default jurisdictions."""
    return GeneratorRegistry(seed=test_seed)


@pytest.fixture
def northeria(test_rng: np.random.Generator) -> SocialNumberGenerator:
    """Northeria generator with a deterministic RNG."""
    return SocialNumberGenerator(NortheriaPolicy(test_rng))


@pytest.fixture
def southeria(test_rng: np.random.Generator) -> SocialNumberGenerator:
    """Southeria generator with a deterministic RNG."""
    return SocialNumberGenerator(SoutheriaPolicy(test_rng))


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SOCIAL_NUMBERS_* variables from the host out of config tests."""
    for name in list(os.environ):
        if name.startswith("SOCIAL_NUMBERS_"):
            monkeypatch.delenv(name, raising=False)
