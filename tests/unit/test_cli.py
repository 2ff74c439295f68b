"""
Unit tests for the command-line interface.
"""

import logging
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from social_numbers.cli import main
from social_numbers.generators.checksum import checksum_matches


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "social_numbers.yaml"
    path.write_text("logging:\n  level: WARNING\n")
    return path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to the runner's captured streams."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


def numbers_in(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip().isdigit()]


class TestGenerateCommand:
    """Tests for `generate`."""

    def test_generates_requested_count(self, runner: CliRunner, config_file: Path):
        result = runner.invoke(
            main,
            ["-c", str(config_file), "generate", "northeria",
             "--sex", "female", "--date", "2022-12-25", "--count", "3"],
        )

        assert result.exit_code == 0, result.output
        numbers = numbers_in(result.output)
        assert len(numbers) == 3
        for number in numbers:
            assert number.startswith("920221225")
            assert checksum_matches(number, 11)

    def test_seed_makes_output_reproducible(self, runner: CliRunner, config_file: Path):
        args = ["-c", str(config_file), "generate", "southeria",
                "-s", "male", "-d", "2023-05-17", "-n", "2", "--seed", "7"]

        first = runner.invoke(main, args)
        second = runner.invoke(main, args)

        assert first.exit_code == 0, first.output
        assert numbers_in(first.output) == numbers_in(second.output)
        assert numbers_in(first.output)[0].startswith("22023517")

    def test_unknown_jurisdiction(self, runner: CliRunner, config_file: Path):
        result = runner.invoke(
            main,
            ["-c", str(config_file), "generate", "atlantia",
             "--sex", "male", "--date", "2000-01-01"],
        )

        assert result.exit_code == 1
        assert "invalid jurisdiction: atlantia" in result.output

    def test_calendar_is_not_checked(self, runner: CliRunner, config_file: Path):
        """Month 13 and day 32 are encoded as given."""
        result = runner.invoke(
            main,
            ["-c", str(config_file), "generate", "northeria",
             "--sex", "male", "--date", "2022-13-32"],
        )

        assert result.exit_code == 0, result.output
        numbers = numbers_in(result.output)
        assert len(numbers) == 1
        assert numbers[0].startswith("720221332")
        assert checksum_matches(numbers[0], 11)

    def test_short_year_is_accepted(self, runner: CliRunner, config_file: Path):
        result = runner.invoke(
            main,
            ["-c", str(config_file), "generate", "southeria",
             "--sex", "female", "--date", "812-1-9"],
        )

        assert result.exit_code == 0, result.output
        assert numbers_in(result.output)[0].startswith("181219")

    @pytest.mark.parametrize("value", ["2022-12", "2022/12/25", "2022-ab-01", "-2022-1-1"])
    def test_malformed_date_rejected(
        self, runner: CliRunner, config_file: Path, value: str
    ):
        result = runner.invoke(
            main,
            ["-c", str(config_file), "generate", "northeria",
             "--sex", "male", "--date", value],
        )

        assert result.exit_code == 2

    def test_negative_seed_rejected(self, runner: CliRunner, config_file: Path):
        result = runner.invoke(
            main,
            ["-c", str(config_file), "generate", "northeria",
             "--sex", "male", "--date", "2000-01-01", "--seed", "-1"],
        )

        assert result.exit_code == 2
        assert "--seed" in result.output

    def test_invalid_sex_rejected(self, runner: CliRunner, config_file: Path):
        result = runner.invoke(
            main,
            ["-c", str(config_file), "generate", "northeria",
             "--sex", "other", "--date", "2000-01-01"],
        )

        assert result.exit_code == 2


class TestVerifyCommand:
    """Tests for `verify`."""

    def test_valid_number(self, runner: CliRunner, config_file: Path):
        result = runner.invoke(
            main, ["-c", str(config_file), "verify", "northeria", "9202212254821711"]
        )

        assert result.exit_code == 0, result.output
        assert "valid" in result.output

    def test_invalid_number(self, runner: CliRunner, config_file: Path):
        result = runner.invoke(
            main, ["-c", str(config_file), "verify", "southeria", "2202351712353"]
        )

        assert result.exit_code == 1
        assert "invalid checksum" in result.output


class TestOtherCommands:
    """Tests for `jurisdictions` and `validate-config`."""

    def test_jurisdictions(self, runner: CliRunner, config_file: Path):
        result = runner.invoke(main, ["-c", str(config_file), "jurisdictions"])

        assert result.exit_code == 0
        assert "northeria" in result.output
        assert "southeria" in result.output

    def test_validate_config(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "seeded.yaml"
        path.write_text("seed: 3\n")

        result = runner.invoke(main, ["-c", str(path), "validate-config"])

        assert result.exit_code == 0, result.output
        assert "Configuration is valid." in result.output
        assert "Fixed seed 3" in result.output
