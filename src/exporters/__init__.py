"""
Growth report export for Little Journey.
"""

from .report import GrowthReportData, build_report_data, report_sections
from .json_export import (
    export_report_json,
    export_measurements_json,
    load_measurements_json,
    report_to_dict,
)
from .markdown import export_report_markdown
from .html_report import export_report_html

__all__ = [
    "GrowthReportData",
    "build_report_data",
    "report_sections",
    "export_report_json",
    "export_measurements_json",
    "load_measurements_json",
    "report_to_dict",
    "export_report_markdown",
    "export_report_html",
]
