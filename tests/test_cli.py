"""
Tests for the command-line interface.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import json

import pytest
from click.testing import CliRunner
from datetime import date


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def measurements_file(tmp_path):
    from src.exporters import export_measurements_json
    from src.models import GrowthMeasurement, MeasurementType, NewMeasurement

    measurements = [
        GrowthMeasurement.from_new(NewMeasurement(
            type=MeasurementType.HEIGHT, value=75.5, date=date(2025, 1, 20), child_id="child_1",
        )),
        GrowthMeasurement.from_new(NewMeasurement(
            type=MeasurementType.WEIGHT, value=7.0, date=date(2024, 4, 2), child_id="child_1",
        )),
    ]
    path = tmp_path / "measurements.json"
    path.write_text(export_measurements_json(measurements))
    return path


class TestClassifyCommand:
    """Test `classify`."""

    def test_by_age(self, runner):
        from cli import cli

        result = runner.invoke(cli, ["classify", "75.5", "--age-months", "12", "--sex", "male"])

        assert result.exit_code == 0
        assert "15th-50th percentile" in result.output

    def test_singapore(self, runner):
        from cli import cli

        result = runner.invoke(cli, [
            "classify", "75.5", "--age-months", "12", "--sex", "male", "--standard", "singapore",
        ])

        assert result.exit_code == 0
        assert "50th-85th percentile" in result.output

    def test_by_dates(self, runner):
        from cli import cli

        result = runner.invoke(cli, [
            "classify", "68", "--dob", "2024-01-15", "--on", "2025-01-02", "--sex", "male",
        ])

        assert result.exit_code == 0
        assert "Below 3rd percentile" in result.output

    def test_needs_age(self, runner):
        from cli import cli

        result = runner.invoke(cli, ["classify", "75.5", "--sex", "male"])

        assert result.exit_code == 1
        assert "--age-months" in result.output

    def test_rejects_non_positive_value(self, runner):
        from cli import cli

        result = runner.invoke(cli, ["classify", "0", "--age-months", "12", "--sex", "male"])

        assert result.exit_code == 1


class TestOtherCommands:
    """Test `age`, `table` and `info`."""

    def test_age(self, runner):
        from cli import cli

        result = runner.invoke(cli, ["age", "2024-01-31", "2024-03-01"])

        assert result.exit_code == 0
        assert result.output.strip() == "2"

    def test_age_bad_date(self, runner):
        from cli import cli

        result = runner.invoke(cli, ["age", "31/01/2024", "2024-03-01"])

        assert result.exit_code == 1

    def test_table(self, runner):
        from cli import cli

        result = runner.invoke(cli, ["table", "--metric", "weight", "--sex", "female"])

        assert result.exit_code == 0
        assert "p97" in result.output
        assert "11.5" in result.output

    def test_info(self, runner):
        from cli import cli

        result = runner.invoke(cli, ["info"])

        assert result.exit_code == 0
        assert "Singapore" in result.output


class TestReportCommand:
    """Test `report`."""

    def test_markdown_to_stdout(self, runner, measurements_file):
        from cli import cli

        result = runner.invoke(cli, [
            "report", str(measurements_file),
            "--name", "Leo", "--dob", "2024-01-15", "--sex", "male",
            "--end", "2025-01-31",
        ])

        assert result.exit_code == 0
        assert "# Growth Report: Leo" in result.output
        assert "**Period:** 31/07/2024 - 31/01/2025" in result.output
        assert "15th-50th percentile" in result.output
        # Dated before the default six-month window
        assert "7 kg" not in result.output

    def test_json_to_file(self, runner, measurements_file, tmp_path):
        from cli import cli

        out = tmp_path / "leo.json"
        result = runner.invoke(cli, [
            "report", str(measurements_file),
            "--name", "Leo", "--dob", "2024-01-15", "--sex", "male",
            "--start", "2024-01-01", "--end", "2025-01-31",
            "--standard", "singapore", "--format", "json", "-o", str(out),
        ])

        assert result.exit_code == 0
        data = json.loads(out.read_text())
        assert data["standard"] == "singapore"
        assert data["measurement_count"] == 2
        assert data["measurements"]["height"][0]["percentile"]["band"] == "50th-85th"

    def test_start_after_end(self, runner, measurements_file):
        from cli import cli

        result = runner.invoke(cli, [
            "report", str(measurements_file),
            "--name", "Leo", "--dob", "2024-01-15",
            "--start", "2025-02-01", "--end", "2025-01-01",
        ])

        assert result.exit_code == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
