"""
Growth tracking engine for Little Journey.

Records measurements for a child, keeps the family's preferred growth
standard, and classifies measurements against the reference tables.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Protocol

from knowledge.growth import PercentileResult, classify
from src.models import (
    ChildProfile,
    GrowthMeasurement,
    MeasurementType,
    NewMeasurement,
    PercentileStandard,
    calculate_age_in_months,
)

logger = logging.getLogger(__name__)


class MeasurementStore(Protocol):
    """Storage backend used by GrowthTracker."""

    def add(self, measurement: GrowthMeasurement) -> GrowthMeasurement: ...

    def list_for_child(
        self, child_id: str, type: MeasurementType | None = None
    ) -> list[GrowthMeasurement]: ...

    def delete(self, measurement_id: str) -> bool: ...


class InMemoryMeasurementStore:
    """Process-local measurement store, newest measurement first."""

    def __init__(self, measurements: list[GrowthMeasurement] | None = None):
        self._measurements: list[GrowthMeasurement] = []
        for m in measurements or []:
            self.add(m)

    def add(self, measurement: GrowthMeasurement) -> GrowthMeasurement:
        self._measurements.append(measurement)
        self._measurements.sort(key=lambda m: m.date, reverse=True)
        return measurement

    def list_for_child(
        self, child_id: str, type: MeasurementType | None = None
    ) -> list[GrowthMeasurement]:
        wanted = MeasurementType(type) if type is not None else None
        return [
            m for m in self._measurements
            if m.child_id == child_id and (wanted is None or m.type == wanted)
        ]

    def delete(self, measurement_id: str) -> bool:
        before = len(self._measurements)
        self._measurements = [m for m in self._measurements if m.id != measurement_id]
        return len(self._measurements) < before

    def __len__(self) -> int:
        return len(self._measurements)


class GrowthTracker:
    """
    Measurement bookkeeping plus percentile lookups.

    The tracker never stores percentile results; they are computed from the
    measurement, the child's age at measurement and the chosen standard.
    """

    def __init__(
        self,
        store: MeasurementStore | None = None,
        preferred_standard: PercentileStandard | str = PercentileStandard.WHO,
    ):
        self.store = store if store is not None else InMemoryMeasurementStore()
        self._preferred_standard = PercentileStandard(preferred_standard)

    @property
    def preferred_standard(self) -> PercentileStandard:
        return self._preferred_standard

    @preferred_standard.setter
    def preferred_standard(self, standard: PercentileStandard | str) -> None:
        self._preferred_standard = PercentileStandard(standard)
        logger.debug("Preferred standard set to %s", self._preferred_standard.value)

    # -------------------------------------------------------------------------
    # Measurements
    # -------------------------------------------------------------------------

    def add_measurement(self, new: NewMeasurement) -> GrowthMeasurement:
        """Record a new measurement and return the stored record."""
        measurement = self.store.add(GrowthMeasurement.from_new(new))
        logger.info(
            "Recorded %s %s for child %s on %s",
            measurement.type.value, measurement.display_value(),
            measurement.child_id, measurement.date.isoformat(),
        )
        return measurement

    def get_measurements(
        self,
        child_id: str,
        type: MeasurementType | str | None = None,
    ) -> list[GrowthMeasurement]:
        """A child's measurements, newest first, optionally of one type."""
        return self.store.list_for_child(child_id, MeasurementType(type) if type is not None else None)

    def get_latest_measurement(
        self,
        child_id: str,
        type: MeasurementType | str,
    ) -> GrowthMeasurement | None:
        measurements = self.get_measurements(child_id, type)
        return measurements[0] if measurements else None

    def delete_measurement(self, measurement_id: str) -> bool:
        deleted = self.store.delete(measurement_id)
        if not deleted:
            logger.warning("Measurement %s not found for deletion", measurement_id)
        return deleted

    # -------------------------------------------------------------------------
    # Percentiles
    # -------------------------------------------------------------------------

    def calculate_percentile(
        self,
        measurement: GrowthMeasurement,
        child_age_months: int,
        child_sex: str,
        standard: PercentileStandard | str | None = None,
    ) -> PercentileResult:
        """Classify a measurement, using the preferred standard unless given one."""
        chosen = PercentileStandard(standard) if standard is not None else self.preferred_standard
        return classify(
            measurement.value,
            child_age_months,
            child_sex,
            measurement.type.value,
            chosen.value,
        )

    def percentile_for_child(
        self,
        measurement: GrowthMeasurement,
        child: ChildProfile,
        standard: PercentileStandard | str | None = None,
    ) -> PercentileResult | None:
        """Classify using the child's profile. None if sex is not recorded."""
        if child.sex is None:
            return None
        age_months = calculate_age_in_months(child.date_of_birth, measurement.date)
        return self.calculate_percentile(measurement, age_months, child.sex.value, standard)

    def percentile_data(
        self,
        child: ChildProfile,
        standard: PercentileStandard | str | None = None,
    ) -> dict[str, PercentileResult]:
        """Percentile results keyed by measurement id for all of a child's measurements."""
        results = {}
        for m in self.get_measurements(child.id):
            result = self.percentile_for_child(m, child, standard)
            if result is not None:
                results[m.id] = result
        return results

    def current_percentile(
        self,
        child: ChildProfile,
        type: MeasurementType | str,
        standard: PercentileStandard | str | None = None,
    ) -> PercentileResult | None:
        """Percentile of the most recent measurement of a type."""
        latest = self.get_latest_measurement(child.id, type)
        if latest is None:
            return None
        return self.percentile_for_child(latest, child, standard)

    def measurements_between(
        self,
        child_id: str,
        start_date: date,
        end_date: date,
    ) -> list[GrowthMeasurement]:
        """Measurements dated within [start_date, end_date]."""
        if start_date > end_date:
            raise ValueError("start_date must not be after end_date")
        return [
            m for m in self.get_measurements(child_id)
            if start_date <= m.date <= end_date
        ]
