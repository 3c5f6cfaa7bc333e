"""
JSON exporter for growth reports.

Exports report data as clean, human-readable JSON.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any

from src.models import GrowthMeasurement
from .report import GrowthReportData, report_sections


class DateTimeEncoder(json.JSONEncoder):
    """JSON encoder that handles dates and datetimes."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)


def report_to_dict(data: GrowthReportData) -> dict[str, Any]:
    """Plain-dict form of a growth report."""
    sections = {}
    total = 0
    for mtype, rows in report_sections(data):
        total += len(rows)
        sections[mtype.value] = [
            {
                "id": row.measurement.id,
                "date": row.measurement.date,
                "age_months": row.age_months,
                "value": row.measurement.value,
                "unit": row.measurement.unit,
                "percentile": row.percentile.to_dict() if row.percentile else None,
            }
            for row in rows
        ]

    return {
        "child": {
            "id": data.child.id,
            "name": data.child.name,
            "date_of_birth": data.child.date_of_birth,
            "sex": data.child.sex.value if data.child.sex else None,
        },
        "standard": data.standard.value,
        "period": {"start": data.start_date, "end": data.end_date},
        "generated_on": data.generated_on,
        "measurement_count": total,
        "measurements": sections,
    }


def export_report_json(
    data: GrowthReportData,
    output_path: Path | None = None,
    indent: int = 2,
) -> str:
    """
    Export a growth report to JSON format.

    Args:
        data: The report to export
        output_path: Optional path to write the JSON file
        indent: JSON indentation level

    Returns:
        JSON string representation of the report
    """
    json_str = json.dumps(report_to_dict(data), indent=indent, cls=DateTimeEncoder)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_str)

    return json_str


def export_measurements_json(measurements: list[GrowthMeasurement], indent: int = 2) -> str:
    """Serialize measurements in the format load_measurements_json reads."""
    return json.dumps([m.model_dump(mode="json") for m in measurements], indent=indent)


def load_measurements_json(text: str) -> list[GrowthMeasurement]:
    """Parse a JSON list of measurement records."""
    raw = json.loads(text)
    if not isinstance(raw, list):
        raise ValueError("Expected a JSON list of measurements")
    return [GrowthMeasurement.model_validate(item) for item in raw]
