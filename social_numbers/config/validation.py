"""
Configuration validation for Social Numbers.

Provides checks beyond Pydantic model validation. Problems found here are
not fatal; the model already rejects invalid values.
"""

import structlog

from social_numbers.config.models import GeneratorConfig

logger = structlog.get_logger()


def validate_config(config: GeneratorConfig) -> list[str]:
    """
    Validate generator configuration.

    Args:
        config: GeneratorConfig to validate

    Returns:
        List of warning messages
    """
    warnings: list[str] = []

    if config.seed is not None:
        warnings.append(
            f"Fixed seed {config.seed} configured. Generated numbers are "
            "reproducible and should only be used for testing."
        )

    if config.logging.json_output and config.logging.level == "DEBUG":
        warnings.append(
            "DEBUG logging with JSON output records every generated number."
        )

    # Log warnings
    for warning in warnings:
        logger.warning("config_validation_warning", message=warning)

    return warnings
