"""
Growth tracking engines.
"""

from .tracker import GrowthTracker, InMemoryMeasurementStore, MeasurementStore

__all__ = [
    "GrowthTracker",
    "InMemoryMeasurementStore",
    "MeasurementStore",
]
