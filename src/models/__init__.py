"""
Data models for Little Journey.
"""

from .growth import (
    generate_id,
    calculate_age_in_months,
    Sex,
    MeasurementType,
    PercentileStandard,
    ChildProfile,
    NewMeasurement,
    GrowthMeasurement,
)

__all__ = [
    "generate_id",
    "calculate_age_in_months",
    "Sex",
    "MeasurementType",
    "PercentileStandard",
    "ChildProfile",
    "NewMeasurement",
    "GrowthMeasurement",
]
