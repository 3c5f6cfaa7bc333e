#!/usr/bin/env python3
"""
Little Journey CLI

Command-line interface for growth percentiles and growth reports.
"""

import calendar
import sys
from datetime import date
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def setup_paths():
    """Add the project root to sys.path for imports."""
    root = Path(__file__).parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


setup_paths()

SEX_CHOICE = click.Choice(["male", "female"])
METRIC_CHOICE = click.Choice(["height", "weight", "head_circumference"])
STANDARD_CHOICE = click.Choice(["who", "singapore"])


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    sys.exit(1)


def _parse_date(value: str, label: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        _fail(f"Invalid {label} '{value}', expected YYYY-MM-DD")


def _band_style(within_normal: bool) -> str:
    return "green" if within_normal else "yellow"


@click.group()
@click.version_option(version="0.1.0", prog_name="little-journey")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """
    Little Journey - Growth Tracking

    Classify your child's height, weight and head circumference against
    WHO or Singapore growth references and produce growth reports.
    """
    from src.logging_config import configure_logging

    configure_logging("DEBUG" if verbose else "WARNING")


@cli.command()
@click.argument("value", type=float)
@click.option("--age-months", type=int, help="Age in months at measurement")
@click.option("--dob", type=str, help="Date of birth (YYYY-MM-DD), instead of --age-months")
@click.option("--on", "measured_on", type=str, help="Measurement date (YYYY-MM-DD), defaults to today")
@click.option("--sex", type=SEX_CHOICE, required=True, help="Child's sex")
@click.option("--metric", type=METRIC_CHOICE, default="height", show_default=True,
              help="What was measured")
@click.option("--standard", type=STANDARD_CHOICE, default="who", show_default=True,
              help="Reference population")
def classify(
    value: float,
    age_months: Optional[int],
    dob: Optional[str],
    measured_on: Optional[str],
    sex: str,
    metric: str,
    standard: str,
):
    """
    Classify a measurement into a percentile band.

    Examples:

        little-journey classify 75.5 --age-months 12 --sex male

        little-journey classify 9.2 --metric weight --dob 2024-01-10 --sex female
    """
    from knowledge.growth import classify as classify_measurement, METRIC_UNITS
    from src.models import calculate_age_in_months

    if age_months is None:
        if not dob:
            _fail("Provide --age-months or --dob")
        birth = _parse_date(dob, "date of birth")
        on = _parse_date(measured_on, "measurement date") if measured_on else date.today()
        age_months = calculate_age_in_months(birth, on)

    try:
        result = classify_measurement(value, age_months, sex, metric, standard)
    except ValueError as e:
        _fail(str(e))

    style = _band_style(result.is_within_normal_range)
    console.print(Panel(
        f"[bold {style}]{result.range_description}[/bold {style}]\n\n"
        f"Value: {value} {METRIC_UNITS[metric]}\n"
        f"Age: {age_months} months (reference row: {result.reference_age_months} months)\n"
        f"Standard: {'WHO' if standard == 'who' else 'Singapore'}\n"
        f"Within normal range: {'yes' if result.is_within_normal_range else 'no'}",
        title=metric.replace("_", " ").title(),
        border_style=style,
    ))


@cli.command()
@click.argument("birth_date")
@click.argument("measurement_date")
def age(birth_date: str, measurement_date: str):
    """
    Age in whole months between two dates.

    Example:

        little-journey age 2024-01-31 2024-03-01
    """
    from src.models import calculate_age_in_months

    birth = _parse_date(birth_date, "birth date")
    measured = _parse_date(measurement_date, "measurement date")
    console.print(str(calculate_age_in_months(birth, measured)))


@cli.command()
@click.option("--metric", type=METRIC_CHOICE, default="height", show_default=True)
@click.option("--sex", type=SEX_CHOICE, required=True)
@click.option("--standard", type=STANDARD_CHOICE, default="who", show_default=True)
def table(metric: str, sex: str, standard: str):
    """
    Show a reference table.

    Example:

        little-journey table --metric weight --sex female --standard singapore
    """
    from knowledge.growth import get_reference_table, METRIC_UNITS, PERCENTILE_KEYS

    unit = METRIC_UNITS[metric]
    out = Table(title=f"{standard.upper() if standard == 'who' else 'Singapore'} "
                      f"{metric.replace('_', ' ')} for {sex}s ({unit})")
    out.add_column("Age (months)", justify="right", style="cyan")
    for key in PERCENTILE_KEYS:
        out.add_column(key, justify="right")

    for bp in get_reference_table(metric, sex, standard):
        out.add_row(str(bp.age_months), *(f"{v:.1f}" for v in bp.boundaries))

    console.print(out)


@cli.command()
@click.argument("measurements_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--name", required=True, help="Child's name")
@click.option("--dob", required=True, help="Date of birth (YYYY-MM-DD)")
@click.option("--sex", type=SEX_CHOICE, help="Child's sex (percentiles need it)")
@click.option("--child-id", help="Only include measurements for this child id")
@click.option("--start", help="Report start date (YYYY-MM-DD), default 6 months ago")
@click.option("--end", help="Report end date (YYYY-MM-DD), default today")
@click.option("--standard", type=STANDARD_CHOICE, default="who", show_default=True)
@click.option("--format", "fmt", type=click.Choice(["markdown", "html", "json"]), default="markdown",
              show_default=True, help="Report format")
@click.option("--output", "-o", type=click.Path(), help="Output file path")
def report(
    measurements_path: str,
    name: str,
    dob: str,
    sex: Optional[str],
    child_id: Optional[str],
    start: Optional[str],
    end: Optional[str],
    standard: str,
    fmt: str,
    output: Optional[str],
):
    """
    Generate a growth report from a JSON list of measurements.

    Example:

        little-journey report measurements.json --name Mia --dob 2024-02-01 --sex female -o mia.md
    """
    from src.engines import GrowthTracker, InMemoryMeasurementStore
    from src.exporters import (
        build_report_data,
        export_report_html,
        export_report_json,
        export_report_markdown,
        load_measurements_json,
    )
    from src.models import ChildProfile

    try:
        measurements = load_measurements_json(Path(measurements_path).read_text())
    except ValueError as e:
        _fail(f"Could not read measurements: {e}")

    if child_id is None:
        ids = {m.child_id for m in measurements}
        if len(ids) > 1:
            _fail(f"File holds measurements for {len(ids)} children; pass --child-id")
        child_id = ids.pop() if ids else "child"
    measurements = [m for m in measurements if m.child_id == child_id]

    end_date = _parse_date(end, "end date") if end else date.today()
    if start:
        start_date = _parse_date(start, "start date")
    else:
        # Same day six months earlier, clamped to the month's length
        month = end_date.month - 6
        year = end_date.year + (month - 1) // 12
        month = (month - 1) % 12 + 1
        start_date = date(year, month, min(end_date.day, calendar.monthrange(year, month)[1]))

    child = ChildProfile(id=child_id, name=name, date_of_birth=_parse_date(dob, "date of birth"), sex=sex)
    tracker = GrowthTracker(InMemoryMeasurementStore(measurements), preferred_standard=standard)

    try:
        data = build_report_data(tracker, child, start_date, end_date)
    except ValueError as e:
        _fail(str(e))

    out_path = Path(output) if output else None
    exporters = {
        "markdown": export_report_markdown,
        "html": export_report_html,
        "json": export_report_json,
    }
    rendered = exporters[fmt](data, out_path)

    if out_path:
        console.print(f"[green]✓ Report written to {out_path}[/green]")
    else:
        click.echo(rendered)


@cli.command()
def info():
    """
    Show information about Little Journey growth tracking.
    """
    console.print(Panel(
        "[bold]Little Journey[/bold]\n\n"
        "Growth tracking for babies and toddlers:\n"
        "• Height, weight and head circumference\n"
        "• WHO and Singapore reference percentiles (0-24 months)\n"
        "• Growth reports for your pediatrician\n\n"
        "[dim]Percentile bands are read from the nearest tabulated age.[/dim]",
        title="About",
        border_style="blue",
    ))

    console.print("\n[bold]Quick Start:[/bold]")
    console.print("  little-journey classify 75.5 --age-months 12 --sex male")
    console.print("  little-journey table --metric weight --sex female")
    console.print("  little-journey report measurements.json --name Mia --dob 2024-02-01 --sex female")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
