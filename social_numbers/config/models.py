"""
Pydantic configuration models for Social Numbers.

These models define the structure and validation for generator configuration.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_output: bool = Field(
        default=False,
        description="Render logs as JSON instead of console output",
    )

    @field_validator("level")
    @classmethod
    def level_is_known(cls, v: str) -> str:
        """Normalize the level and ensure it is a standard logging level."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


class GeneratorConfig(BaseSettings):
    """
    Root generator configuration.

    Values can be loaded from YAML files and overridden via environment
    variables, e.g. SOCIAL_NUMBERS_SEED=7 or SOCIAL_NUMBERS_LOGGING__LEVEL=DEBUG.
    """

    seed: int | None = Field(
        default=None,
        ge=0,
        description="Base random seed. Unset means seeding from OS entropy.",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("seed", mode="before")
    @classmethod
    def blank_seed_is_unset(cls, v):
        """Treat an empty value (e.g. an unset ${VAR:-}) as no seed."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    model_config = {
        "env_prefix": "SOCIAL_NUMBERS_",
        "env_nested_delimiter": "__",
    }
