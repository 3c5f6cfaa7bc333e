"""
Growth tracking data models for Little Journey.

These Pydantic models define the internal representation of children and
their growth measurements. Percentile results are derived on demand by
knowledge.growth and never stored on these records.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field, computed_field


def generate_id(prefix: str = "") -> str:
    """Generate a unique identifier."""
    return f"{prefix}{uuid4().hex[:12]}"


# =============================================================================
# ENUMS
# =============================================================================


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class MeasurementType(str, Enum):
    HEIGHT = "height"
    WEIGHT = "weight"
    HEAD_CIRCUMFERENCE = "head_circumference"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def unit(self) -> str:
        return "kg" if self is MeasurementType.WEIGHT else "cm"


class PercentileStandard(str, Enum):
    WHO = "who"
    SINGAPORE = "singapore"

    @property
    def label(self) -> str:
        return "WHO" if self is PercentileStandard.WHO else "Singapore"


# =============================================================================
# AGE
# =============================================================================


def _as_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # fromisoformat only understands "Z" from Python 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value).date()


def calculate_age_in_months(
    birth_date: date | datetime | str,
    measurement_date: date | datetime | str,
) -> int:
    """
    Whole calendar months between birth and measurement.

    Day of month is ignored. Measurements dated before birth give 0.
    """
    birth = _as_date(birth_date)
    measured = _as_date(measurement_date)
    months = (measured.year - birth.year) * 12 + (measured.month - birth.month)
    return max(0, months)


# =============================================================================
# RECORDS
# =============================================================================


class ChildProfile(BaseModel):
    """The child whose growth is being tracked."""
    id: str = Field(default_factory=lambda: generate_id("child_"))
    name: str = Field(min_length=1)
    date_of_birth: date
    sex: Sex | None = None

    def age_in_months(self, on: date | None = None) -> int:
        return calculate_age_in_months(self.date_of_birth, on or date.today())


class NewMeasurement(BaseModel):
    """Input for recording a measurement."""
    type: MeasurementType
    value: float = Field(gt=0, allow_inf_nan=False, description="cm for height/head, kg for weight")
    date: date
    child_id: str = Field(min_length=1)
    photo_uri: str | None = None


class GrowthMeasurement(BaseModel):
    """A recorded growth measurement."""
    id: str = Field(default_factory=lambda: generate_id("measurement_"))
    type: MeasurementType
    value: float = Field(gt=0, allow_inf_nan=False)
    date: date
    child_id: str
    photo_uri: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def unit(self) -> str:
        return self.type.unit

    @classmethod
    def from_new(cls, new: NewMeasurement) -> "GrowthMeasurement":
        now = datetime.now()
        return cls(**new.model_dump(), created_at=now, updated_at=now)

    def display_value(self) -> str:
        """Value with unit, all recorded digits, no trailing ".0"."""
        text = repr(self.value)
        if text.endswith(".0"):
            text = text[:-2]
        return f"{text} {self.unit}"
