"""
Growth report data shared by the report exporters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from knowledge.growth import PercentileResult
from src.models import (
    ChildProfile,
    GrowthMeasurement,
    MeasurementType,
    PercentileStandard,
    calculate_age_in_months,
)

DISCLAIMER = "This report is for informational purposes only. Consult your pediatrician for medical advice."
EMPTY_SECTION = "No measurements recorded"
EMPTY_PERIOD = "No measurements recorded in the selected date range."


@dataclass
class GrowthReportData:
    """Everything a growth report needs."""
    child: ChildProfile
    measurements: list[GrowthMeasurement]
    percentile_data: dict[str, PercentileResult]
    standard: PercentileStandard
    start_date: date
    end_date: date
    generated_on: date = field(default_factory=date.today)

    def __post_init__(self):
        self.standard = PercentileStandard(self.standard)
        if self.start_date > self.end_date:
            raise ValueError("Report start date must not be after end date")


@dataclass
class ReportRow:
    measurement: GrowthMeasurement
    age_months: int
    percentile: PercentileResult | None


def format_date(d: date) -> str:
    return d.strftime("%d/%m/%Y")


def format_sex(child: ChildProfile) -> str:
    return child.sex.value.title() if child.sex else "Not specified"


def report_sections(data: GrowthReportData) -> list[tuple[MeasurementType, list[ReportRow]]]:
    """
    Rows for each metric, in the order height, weight, head circumference.

    Only measurements dated within the report period are kept; each section
    is sorted newest first.
    """
    in_period = [
        m for m in data.measurements
        if data.start_date <= m.date <= data.end_date
    ]
    sections = []
    for mtype in MeasurementType:
        items = sorted((m for m in in_period if m.type == mtype), key=lambda m: m.date, reverse=True)
        rows = [
            ReportRow(
                measurement=m,
                age_months=calculate_age_in_months(data.child.date_of_birth, m.date),
                percentile=data.percentile_data.get(m.id),
            )
            for m in items
        ]
        sections.append((mtype, rows))
    return sections


def build_report_data(
    tracker,
    child: ChildProfile,
    start_date: date,
    end_date: date,
    standard: PercentileStandard | str | None = None,
) -> GrowthReportData:
    """Assemble report data for a child from a GrowthTracker."""
    chosen = PercentileStandard(standard) if standard is not None else tracker.preferred_standard
    return GrowthReportData(
        child=child,
        measurements=tracker.measurements_between(child.id, start_date, end_date),
        percentile_data=tracker.percentile_data(child, chosen),
        standard=chosen,
        start_date=start_date,
        end_date=end_date,
    )
