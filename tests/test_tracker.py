"""
Tests for the growth tracker and models.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from datetime import date, datetime


def _child(sex="male"):
    from src.models import ChildProfile

    return ChildProfile(id="child_1", name="Leo", date_of_birth=date(2024, 1, 15), sex=sex)


def _new(type, value, on, child_id="child_1"):
    from src.models import NewMeasurement

    return NewMeasurement(type=type, value=value, date=on, child_id=child_id)


class TestAgeInMonths:
    """Test calendar month arithmetic."""

    def test_day_of_month_ignored(self):
        from src.models import calculate_age_in_months

        assert calculate_age_in_months(date(2024, 1, 31), date(2024, 3, 1)) == 2
        assert calculate_age_in_months(date(2024, 1, 1), date(2024, 1, 31)) == 0

    def test_across_years(self):
        from src.models import calculate_age_in_months

        assert calculate_age_in_months(date(2023, 11, 20), date(2025, 2, 3)) == 15

    def test_before_birth_is_zero(self):
        from src.models import calculate_age_in_months

        assert calculate_age_in_months(date(2024, 5, 1), date(2024, 2, 1)) == 0

    def test_accepts_strings_and_datetimes(self):
        from src.models import calculate_age_in_months

        assert calculate_age_in_months("2024-01-15", datetime(2025, 1, 2, 9, 30)) == 12

    def test_utc_timestamp_strings(self):
        from src.models import calculate_age_in_months

        assert calculate_age_in_months("2024-01-15T00:00:00Z", "2025-01-01") == 12
        assert calculate_age_in_months("2024-01-15T08:30:00.000Z", "2024-07-01T00:00:00Z") == 6

    def test_child_age(self):
        child = _child()
        assert child.age_in_months(date(2024, 7, 1)) == 6


class TestModels:
    """Test growth record models."""

    def test_measurement_unit(self):
        from src.models import GrowthMeasurement, MeasurementType

        m = GrowthMeasurement.from_new(_new(MeasurementType.WEIGHT, 9.25, date(2025, 1, 15)))

        assert m.unit == "kg"
        assert m.display_value() == "9.25 kg"
        assert m.id.startswith("measurement_")
        assert m.created_at == m.updated_at

    def test_display_value_keeps_all_digits(self):
        from src.models import GrowthMeasurement, MeasurementType

        def shown(value, type=MeasurementType.WEIGHT):
            return GrowthMeasurement.from_new(_new(type, value, date(2025, 1, 15))).display_value()

        assert shown(12.3456789) == "12.3456789 kg"
        assert shown(12.0) == "12 kg"
        assert shown(75.55, MeasurementType.HEIGHT) == "75.55 cm"

    def test_value_must_be_positive(self):
        from pydantic import ValidationError
        from src.models import MeasurementType

        with pytest.raises(ValidationError):
            _new(MeasurementType.HEIGHT, 0, date(2025, 1, 15))
        with pytest.raises(ValidationError):
            _new(MeasurementType.HEIGHT, float("inf"), date(2025, 1, 15))

    def test_labels(self):
        from src.models import MeasurementType, PercentileStandard

        assert MeasurementType.HEAD_CIRCUMFERENCE.label == "Head Circumference"
        assert MeasurementType.HEAD_CIRCUMFERENCE.unit == "cm"
        assert PercentileStandard.WHO.label == "WHO"
        assert PercentileStandard.SINGAPORE.label == "Singapore"


class TestMeasurements:
    """Test measurement bookkeeping."""

    def test_newest_first(self):
        from src.engines import GrowthTracker
        from src.models import MeasurementType

        tracker = GrowthTracker()
        tracker.add_measurement(_new(MeasurementType.HEIGHT, 70.0, date(2024, 10, 1)))
        tracker.add_measurement(_new(MeasurementType.HEIGHT, 75.5, date(2025, 1, 20)))
        tracker.add_measurement(_new(MeasurementType.HEIGHT, 72.0, date(2024, 12, 1)))

        dates = [m.date for m in tracker.get_measurements("child_1")]
        assert dates == [date(2025, 1, 20), date(2024, 12, 1), date(2024, 10, 1)]

    def test_filter_by_type_and_child(self):
        from src.engines import GrowthTracker
        from src.models import MeasurementType

        tracker = GrowthTracker()
        tracker.add_measurement(_new(MeasurementType.HEIGHT, 70.0, date(2024, 10, 1)))
        tracker.add_measurement(_new(MeasurementType.WEIGHT, 8.5, date(2024, 10, 1)))
        tracker.add_measurement(_new(MeasurementType.WEIGHT, 7.0, date(2024, 10, 1), child_id="child_2"))

        weights = tracker.get_measurements("child_1", "weight")
        assert [m.value for m in weights] == [8.5]
        assert len(tracker.get_measurements("child_1")) == 2

    def test_latest(self):
        from src.engines import GrowthTracker
        from src.models import MeasurementType

        tracker = GrowthTracker()
        assert tracker.get_latest_measurement("child_1", MeasurementType.WEIGHT) is None

        tracker.add_measurement(_new(MeasurementType.WEIGHT, 8.1, date(2024, 9, 1)))
        tracker.add_measurement(_new(MeasurementType.WEIGHT, 9.0, date(2024, 12, 1)))

        assert tracker.get_latest_measurement("child_1", MeasurementType.WEIGHT).value == 9.0

    def test_delete(self):
        from src.engines import GrowthTracker
        from src.models import MeasurementType

        tracker = GrowthTracker()
        m = tracker.add_measurement(_new(MeasurementType.HEIGHT, 70.0, date(2024, 10, 1)))

        assert tracker.delete_measurement(m.id) is True
        assert tracker.delete_measurement(m.id) is False
        assert tracker.get_measurements("child_1") == []

    def test_measurements_between(self):
        from src.engines import GrowthTracker
        from src.models import MeasurementType

        tracker = GrowthTracker()
        for on in (date(2024, 6, 30), date(2024, 7, 1), date(2024, 9, 30), date(2024, 10, 1)):
            tracker.add_measurement(_new(MeasurementType.HEIGHT, 68.0, on))

        within = tracker.measurements_between("child_1", date(2024, 7, 1), date(2024, 9, 30))
        assert sorted(m.date for m in within) == [date(2024, 7, 1), date(2024, 9, 30)]

        with pytest.raises(ValueError):
            tracker.measurements_between("child_1", date(2024, 9, 30), date(2024, 7, 1))


class TestPercentiles:
    """Test percentile lookups through the tracker."""

    def test_preferred_standard(self):
        from src.engines import GrowthTracker
        from src.models import GrowthMeasurement, MeasurementType, PercentileStandard

        tracker = GrowthTracker()
        m = GrowthMeasurement.from_new(_new(MeasurementType.HEIGHT, 75.5, date(2025, 1, 15)))

        assert tracker.preferred_standard == PercentileStandard.WHO
        assert tracker.calculate_percentile(m, 12, "male").range_description == "15th-50th percentile"

        tracker.preferred_standard = "singapore"
        assert tracker.preferred_standard == PercentileStandard.SINGAPORE
        assert tracker.calculate_percentile(m, 12, "male").range_description == "50th-85th percentile"

        # Explicit standard overrides the preference
        assert tracker.calculate_percentile(m, 12, "male", "who").range_description == "15th-50th percentile"

    def test_unknown_standard_rejected(self):
        from src.engines import GrowthTracker

        tracker = GrowthTracker()
        with pytest.raises(ValueError):
            tracker.preferred_standard = "cdc"

    def test_percentile_for_child_uses_age_at_measurement(self):
        from src.engines import GrowthTracker
        from src.models import MeasurementType

        tracker = GrowthTracker()
        # Born 2024-01-15, measured 2025-01-20: 12 months
        m = tracker.add_measurement(_new(MeasurementType.HEIGHT, 75.5, date(2025, 1, 20)))

        result = tracker.percentile_for_child(m, _child())
        assert result.reference_age_months == 12
        assert result.range_description == "15th-50th percentile"

    def test_no_sex_no_percentile(self):
        from src.engines import GrowthTracker
        from src.models import MeasurementType

        tracker = GrowthTracker()
        child = _child(sex=None)
        m = tracker.add_measurement(_new(MeasurementType.HEIGHT, 75.5, date(2025, 1, 20)))

        assert tracker.percentile_for_child(m, child) is None
        assert tracker.percentile_data(child) == {}
        assert tracker.current_percentile(child, MeasurementType.HEIGHT) is None

    def test_percentile_data(self):
        from src.engines import GrowthTracker
        from src.models import MeasurementType

        tracker = GrowthTracker()
        h = tracker.add_measurement(_new(MeasurementType.HEIGHT, 68.0, date(2025, 1, 20)))
        w = tracker.add_measurement(_new(MeasurementType.WEIGHT, 9.6, date(2025, 1, 20)))

        data = tracker.percentile_data(_child())

        assert set(data) == {h.id, w.id}
        assert data[h.id].is_within_normal_range is False
        assert data[w.id].range_description == "50th-85th percentile"

    def test_current_percentile(self):
        from src.engines import GrowthTracker
        from src.models import MeasurementType

        tracker = GrowthTracker()
        tracker.add_measurement(_new(MeasurementType.WEIGHT, 5.0, date(2024, 7, 15)))
        tracker.add_measurement(_new(MeasurementType.WEIGHT, 12.5, date(2025, 1, 15)))

        result = tracker.current_percentile(_child(), "weight")
        assert result.range_description == "Above 97th percentile"
        assert tracker.current_percentile(_child(), "height") is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
