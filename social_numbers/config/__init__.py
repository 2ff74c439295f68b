"""
Configuration module for Social Numbers.

This module provides:
- Pydantic configuration models
- YAML configuration loading
- Configuration validation
"""

from social_numbers.config.models import GeneratorConfig, LoggingConfig
from social_numbers.config.loader import load_config
from social_numbers.config.validation import validate_config

__all__ = [
    "GeneratorConfig",
    "LoggingConfig",
    "load_config",
    "validate_config",
]
