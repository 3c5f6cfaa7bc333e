"""
Growth chart calculations.
"""

from .percentiles import (
    classify,
    classify_against,
    get_reference_table,
    nearest_breakpoint,
    percentile_curves,
    boundary_at_age,
    band_order,
    Breakpoint,
    PercentileBand,
    PercentileResult,
    BANDS,
    METRICS,
    METRIC_UNITS,
    PERCENTILE_KEYS,
    SEXES,
    STANDARDS,
)

__all__ = [
    "classify",
    "classify_against",
    "get_reference_table",
    "nearest_breakpoint",
    "percentile_curves",
    "boundary_at_age",
    "band_order",
    "Breakpoint",
    "PercentileBand",
    "PercentileResult",
    "BANDS",
    "METRICS",
    "METRIC_UNITS",
    "PERCENTILE_KEYS",
    "SEXES",
    "STANDARDS",
]
