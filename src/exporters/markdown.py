"""
Markdown exporter for growth reports.

Exports a child's growth measurements and percentile bands as a
human-readable Markdown document for sharing with a pediatrician.
"""

from __future__ import annotations

from pathlib import Path

from .report import (
    DISCLAIMER,
    EMPTY_PERIOD,
    EMPTY_SECTION,
    GrowthReportData,
    format_date,
    format_sex,
    report_sections,
)


def export_report_markdown(
    data: GrowthReportData,
    output_path: Path | None = None,
) -> str:
    """
    Export a growth report to Markdown format.

    Args:
        data: The report to export
        output_path: Optional path to write the Markdown file

    Returns:
        Markdown string representation of the report
    """
    lines = []
    child = data.child
    period = f"{format_date(data.start_date)} - {format_date(data.end_date)}"

    # Header
    lines.append(f"# Growth Report: {child.name}")
    lines.append("")
    lines.append(f"**Period:** {period}")
    lines.append(f"**Standard:** {data.standard.label}")
    lines.append("")

    # Child
    lines.append("## Child")
    lines.append("")
    lines.append(f"- **Name:** {child.name}")
    lines.append(f"- **Date of Birth:** {format_date(child.date_of_birth)}")
    lines.append(f"- **Sex:** {format_sex(child)}")
    lines.append(f"- **Report Period:** {period}")
    lines.append("")

    sections = report_sections(data)
    if not any(rows for _, rows in sections):
        lines.append(f"_{EMPTY_PERIOD}_")
        lines.append("")

    for mtype, rows in sections:
        lines.append(f"## {mtype.label}")
        lines.append("")
        if not rows:
            lines.append(f"_{EMPTY_SECTION}_")
            lines.append("")
            continue

        lines.append("| Date | Age | Value | Percentile |")
        lines.append("|------|-----|-------|------------|")
        for row in rows:
            percentile = row.percentile.range_description if row.percentile else "N/A"
            if row.percentile and not row.percentile.is_within_normal_range:
                percentile = f"**{percentile}**"
            lines.append(
                f"| {format_date(row.measurement.date)} | {row.age_months} months "
                f"| {row.measurement.display_value()} | {percentile} |"
            )
        lines.append("")

    # Footer
    lines.append("---")
    lines.append("")
    lines.append(f"*Generated by Little Journey on {format_date(data.generated_on)}.*")
    lines.append(f"*{DISCLAIMER}*")
    lines.append("")

    markdown = "\n".join(lines)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markdown)

    return markdown
