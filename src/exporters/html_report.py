"""
HTML exporter for growth reports.

Produces a self-contained, print-friendly HTML page. All user-supplied
text is escaped.
"""

from __future__ import annotations

from html import escape
from pathlib import Path

from .report import (
    DISCLAIMER,
    EMPTY_PERIOD,
    EMPTY_SECTION,
    GrowthReportData,
    ReportRow,
    format_date,
    format_sex,
    report_sections,
)

STYLE = """
  * { margin: 0; padding: 0; box-sizing: border-box; }
  body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif;
         padding: 40px; color: #333; line-height: 1.6; }
  .header { text-align: center; margin-bottom: 30px; padding-bottom: 20px; border-bottom: 2px solid #E8B4D9; }
  .header h1 { color: #E8B4D9; font-size: 28px; margin-bottom: 10px; }
  .header .subtitle { color: #666; font-size: 14px; }
  .child-info { background: #FDF5F9; padding: 20px; border-radius: 8px; margin-bottom: 30px; }
  .child-info h2 { color: #E8B4D9; font-size: 20px; margin-bottom: 15px; }
  .child-info .info-row { display: flex; margin-bottom: 8px; }
  .child-info .label { font-weight: 600; width: 150px; color: #555; }
  .section { margin-bottom: 30px; }
  .section h2 { color: #E8B4D9; font-size: 18px; margin-bottom: 15px; padding-bottom: 8px; border-bottom: 1px solid #eee; }
  table { width: 100%; border-collapse: collapse; font-size: 14px; }
  th, td { padding: 12px; text-align: left; border-bottom: 1px solid #eee; }
  th { background: #FDF5F9; font-weight: 600; color: #555; }
  .normal { color: #22C55E; }
  .warning { color: #EAB308; }
  .no-data { color: #999; font-style: italic; padding: 20px 0; }
  .footer { margin-top: 40px; padding-top: 20px; border-top: 1px solid #eee; text-align: center; font-size: 12px; color: #999; }
  .standard-badge { display: inline-block; background: #E8B4D9; color: white; padding: 4px 12px;
                    border-radius: 12px; font-size: 12px; margin-left: 8px; }
  @media print { body { padding: 20px; } .section { page-break-inside: avoid; } }
"""


def _row_html(row: ReportRow) -> str:
    p = row.percentile
    css = "normal" if p and p.is_within_normal_range else "warning"
    description = escape(p.range_description) if p else "N/A"
    return (
        "<tr>"
        f"<td>{format_date(row.measurement.date)}</td>"
        f"<td>{row.age_months} months</td>"
        f"<td>{escape(row.measurement.display_value())}</td>"
        f'<td class="{css}">{description}</td>'
        "</tr>"
    )


def _section_html(title: str, rows: list[ReportRow]) -> str:
    if not rows:
        return (
            f'<div class="section"><h2>{escape(title)}</h2>'
            f'<p class="no-data">{EMPTY_SECTION}</p></div>'
        )
    body = "\n".join(_row_html(r) for r in rows)
    return (
        f'<div class="section"><h2>{escape(title)}</h2>\n'
        "<table><thead><tr><th>Date</th><th>Age</th><th>Value</th><th>Percentile</th></tr></thead>\n"
        f"<tbody>\n{body}\n</tbody></table></div>"
    )


def export_report_html(
    data: GrowthReportData,
    output_path: Path | None = None,
) -> str:
    """
    Export a growth report to HTML.

    Args:
        data: The report to export
        output_path: Optional path to write the HTML file

    Returns:
        HTML document as a string
    """
    child = data.child
    name = escape(child.name)
    period = f"{format_date(data.start_date)} - {format_date(data.end_date)}"
    sections = report_sections(data)
    has_data = any(rows for _, rows in sections)

    parts = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>Growth Report - {name}</title>",
        f"<style>{STYLE}</style>",
        "</head>",
        "<body>",
        '<div class="header"><h1>Growth Report</h1>',
        f'<div class="subtitle">{period}'
        f'<span class="standard-badge">{data.standard.label} Standard</span></div></div>',
        '<div class="child-info">',
        f"<h2>{name}</h2>",
        f'<div class="info-row"><span class="label">Date of Birth:</span>'
        f'<span class="value">{format_date(child.date_of_birth)}</span></div>',
        f'<div class="info-row"><span class="label">Sex:</span>'
        f'<span class="value">{format_sex(child)}</span></div>',
        f'<div class="info-row"><span class="label">Report Period:</span>'
        f'<span class="value">{period}</span></div>',
        "</div>",
    ]

    if not has_data:
        parts.append(f'<p class="no-data">{EMPTY_PERIOD}</p>')

    for mtype, rows in sections:
        parts.append(_section_html(mtype.label, rows))

    parts.extend([
        '<div class="footer">',
        "<p>Generated by Little Journey - Baby Milestone Journal</p>",
        f"<p>{DISCLAIMER}</p>",
        "</div>",
        "</body>",
        "</html>",
    ])

    html = "\n".join(parts)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html)

    return html
