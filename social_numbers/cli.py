"""
Command-line interface for Social Numbers.

Provides commands for generating and verifying social numbers.
"""

import sys

import click
import structlog

from social_numbers.config import load_config, validate_config
from social_numbers.domain.enums import SexType
from social_numbers.generators.registry import GeneratorRegistry, InvalidJurisdictionError
from social_numbers.utils.logging import configure_logging


logger = structlog.get_logger()


class BirthDateType(click.ParamType):
    """
    Parses YEAR-MONTH-DAY into integers.

    The calendar is not checked, so 2022-13-32 is accepted and encoded as-is.
    """

    name = "YEAR-MONTH-DAY"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value

        parts = value.split("-")
        if len(parts) != 3 or not all(part.isdigit() for part in parts):
            self.fail(f"{value!r} is not of the form YEAR-MONTH-DAY", param, ctx)

        year, month, day = (int(part) for part in parts)
        return year, month, day


BIRTH_DATE = BirthDateType()


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Output logs as JSON",
)
@click.pass_context
def main(ctx, config, verbose, json_logs):
    """Fictitious social number generator for Northeria and Southeria."""
    ctx.ensure_object(dict)

    try:
        settings = load_config(config)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    log_level = "DEBUG" if verbose else settings.logging.level
    configure_logging(level=log_level, json_output=json_logs or settings.logging.json_output)

    ctx.obj["config_path"] = config
    ctx.obj["config"] = settings


@main.command()
@click.argument("jurisdiction")
@click.option(
    "--sex", "-s",
    type=click.Choice(["female", "male"], case_sensitive=False),
    required=True,
    help="Sex of the holder",
)
@click.option(
    "--date", "-d", "birth_date",
    type=BIRTH_DATE,
    required=True,
    help="Birth date as YEAR-MONTH-DAY, not checked against the calendar",
)
@click.option(
    "--count", "-n",
    type=click.IntRange(min=1),
    default=1,
    help="Number of social numbers to generate",
)
@click.option(
    "--seed",
    type=click.IntRange(min=0),
    default=None,
    help="Random seed for reproducible output (default: from config)",
)
@click.pass_context
def generate(ctx, jurisdiction, sex, birth_date, count, seed):
    """Generate social numbers for a jurisdiction.

    Examples:

    \b
    # One number for a woman born on 25 December 2022
    social-numbers generate northeria --sex female --date 2022-12-25

    \b
    # Five reproducible numbers
    social-numbers generate southeria -s male -d 2023-05-17 -n 5 --seed 7
    """
    config = ctx.obj["config"]
    if seed is not None:
        config.seed = seed

    try:
        registry = GeneratorRegistry.from_config(config)
        generator = registry.get_generator(jurisdiction)
    except InvalidJurisdictionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    year, month, day = birth_date
    holder_sex = SexType.from_string(sex)
    for _ in range(count):
        number = generator.generate(holder_sex, year, month, day)
        click.echo(number)

    logger.info("social_numbers_generated", jurisdiction=jurisdiction, count=count)


@main.command()
@click.argument("jurisdiction")
@click.argument("identifier")
@click.pass_context
def verify(ctx, jurisdiction, identifier):
    """Check the checksum of a social number."""
    registry = GeneratorRegistry.from_config(ctx.obj["config"])

    try:
        generator = registry.get_generator(jurisdiction)
    except InvalidJurisdictionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if generator.verify(identifier):
        click.echo(f"{identifier}: valid")
    else:
        click.echo(f"{identifier}: invalid checksum", err=True)
        sys.exit(1)


@main.command()
@click.pass_context
def jurisdictions(ctx):
    """List supported jurisdictions."""
    registry = GeneratorRegistry.from_config(ctx.obj["config"])
    for name in registry.jurisdictions:
        click.echo(name)


@main.command("validate-config")
@click.pass_context
def validate_config_cmd(ctx):
    """Validate the configuration file."""
    warnings = validate_config(ctx.obj["config"])

    click.echo("Configuration is valid.")

    if warnings:
        click.echo("\nWarnings:")
        for warning in warnings:
            click.echo(f"  - {warning}")


if __name__ == "__main__":
    main()
