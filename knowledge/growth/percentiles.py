"""
Percentile classification against WHO and Singapore reference tables.

Each reference table is a short list of breakpoints (age in months plus the
3rd, 15th, 50th, 85th and 97th percentile boundaries). A measurement is
classified by reading the boundaries of the breakpoint nearest to the
child's age and walking them in ascending order:

    value < p3   -> Below 3rd percentile
    value < p15  -> 3rd-15th percentile
    value < p50  -> 15th-50th percentile
    value < p85  -> 50th-85th percentile
    value < p97  -> 85th-97th percentile
    otherwise    -> Above 97th percentile

Boundaries are never interpolated across age for classification. When two
breakpoints are equally close, the younger one is used. Ages past the last
breakpoint use the last breakpoint.

Everything here is pure: no I/O, no shared mutable state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from . import singapore, who_2006

Sex = Literal["male", "female"]
MetricType = Literal["height", "weight", "head_circumference"]
Standard = Literal["who", "singapore"]

SEXES: tuple[str, ...] = ("male", "female")
METRICS: tuple[str, ...] = ("height", "weight", "head_circumference")
STANDARDS: tuple[str, ...] = ("who", "singapore")
PERCENTILE_KEYS: tuple[str, ...] = ("p3", "p15", "p50", "p85", "p97")

METRIC_UNITS: dict[str, str] = {
    "height": "cm",
    "weight": "kg",
    "head_circumference": "cm",
}


@dataclass(frozen=True)
class Breakpoint:
    """One row of a reference table."""
    age_months: int
    p3: float
    p15: float
    p50: float
    p85: float
    p97: float

    @property
    def boundaries(self) -> tuple[float, float, float, float, float]:
        return (self.p3, self.p15, self.p50, self.p85, self.p97)


class PercentileBand(str, Enum):
    BELOW_3RD = "below-3rd"
    P3_TO_P15 = "3rd-15th"
    P15_TO_P50 = "15th-50th"
    P50_TO_P85 = "50th-85th"
    P85_TO_P97 = "85th-97th"
    ABOVE_97TH = "above-97th"

    @property
    def description(self) -> str:
        return _BAND_DESCRIPTIONS[self]

    @property
    def representative_percentile(self) -> int:
        """Midpoint of the band, used where a single number is needed."""
        return _BAND_MIDPOINTS[self]

    @property
    def is_within_normal_range(self) -> bool:
        return self not in (PercentileBand.BELOW_3RD, PercentileBand.ABOVE_97TH)


# Ascending order; index is the band's rank
BANDS: tuple[PercentileBand, ...] = tuple(PercentileBand)

_BAND_DESCRIPTIONS: dict[PercentileBand, str] = {
    PercentileBand.BELOW_3RD: "Below 3rd percentile",
    PercentileBand.P3_TO_P15: "3rd-15th percentile",
    PercentileBand.P15_TO_P50: "15th-50th percentile",
    PercentileBand.P50_TO_P85: "50th-85th percentile",
    PercentileBand.P85_TO_P97: "85th-97th percentile",
    PercentileBand.ABOVE_97TH: "Above 97th percentile",
}

_BAND_MIDPOINTS: dict[PercentileBand, int] = {
    PercentileBand.BELOW_3RD: 1,
    PercentileBand.P3_TO_P15: 9,
    PercentileBand.P15_TO_P50: 33,
    PercentileBand.P50_TO_P85: 68,
    PercentileBand.P85_TO_P97: 91,
    PercentileBand.ABOVE_97TH: 99,
}


def band_order(band: PercentileBand | str) -> int:
    """Rank of a band, 0 (below 3rd) through 5 (above 97th)."""
    return BANDS.index(PercentileBand(band))


@dataclass(frozen=True)
class PercentileResult:
    """Where a measurement falls relative to a reference population."""
    band: PercentileBand
    percentile: int
    is_within_normal_range: bool
    range_description: str
    reference_age_months: int

    def to_dict(self) -> dict:
        return {
            "band": self.band.value,
            "percentile": self.percentile,
            "is_within_normal_range": self.is_within_normal_range,
            "range_description": self.range_description,
            "reference_age_months": self.reference_age_months,
        }


# =============================================================================
# REFERENCE TABLES
# =============================================================================


def _build_table(
    name: str,
    raw: dict[int, tuple[float, float, float, float, float]],
) -> tuple[Breakpoint, ...]:
    """Convert a raw age -> boundaries mapping and check its invariants."""
    table = tuple(Breakpoint(age, *raw[age]) for age in sorted(raw))
    if not table:
        raise ValueError(f"Reference table {name} is empty")

    previous_age = None
    for bp in table:
        if previous_age is not None and bp.age_months <= previous_age:
            raise ValueError(f"Reference table {name}: ages must be strictly increasing")
        previous_age = bp.age_months
        values = bp.boundaries
        if any(v <= 0 for v in values):
            raise ValueError(f"Reference table {name}: boundaries must be positive at {bp.age_months} months")
        if any(lo > hi for lo, hi in zip(values, values[1:])):
            raise ValueError(f"Reference table {name}: boundaries out of order at {bp.age_months} months")
    return table


def _tables_for(module, standard: str) -> dict[tuple[str, str, str], tuple[Breakpoint, ...]]:
    sources = {
        ("height", "male"): module.HEIGHT_FOR_AGE_MALE,
        ("height", "female"): module.HEIGHT_FOR_AGE_FEMALE,
        ("weight", "male"): module.WEIGHT_FOR_AGE_MALE,
        ("weight", "female"): module.WEIGHT_FOR_AGE_FEMALE,
        ("head_circumference", "male"): module.HC_FOR_AGE_MALE,
        ("head_circumference", "female"): module.HC_FOR_AGE_FEMALE,
    }
    return {
        (standard, metric, sex): _build_table(f"{standard}/{metric}/{sex}", raw)
        for (metric, sex), raw in sources.items()
    }


# (standard, metric, sex) -> breakpoints
REFERENCE_TABLES: dict[tuple[str, str, str], tuple[Breakpoint, ...]] = {
    **_tables_for(who_2006, "who"),
    **_tables_for(singapore, "singapore"),
}


def _normalize(value, allowed: tuple[str, ...], label: str) -> str:
    """Accept an enum member or its string value."""
    key = getattr(value, "value", value)
    if key not in allowed:
        raise ValueError(f"Unknown {label} {value!r}; expected one of {', '.join(allowed)}")
    return key


def get_reference_table(
    metric: MetricType,
    sex: Sex,
    standard: Standard = "who",
) -> tuple[Breakpoint, ...]:
    """Get the breakpoints for a metric, sex and standard."""
    key = (
        _normalize(standard, STANDARDS, "standard"),
        _normalize(metric, METRICS, "metric"),
        _normalize(sex, SEXES, "sex"),
    )
    return REFERENCE_TABLES[key]


def nearest_breakpoint(table: tuple[Breakpoint, ...], age_months: int) -> Breakpoint:
    """
    Find the breakpoint whose age is closest to age_months.

    Ties resolve to the younger breakpoint.
    """
    return min(table, key=lambda bp: (abs(bp.age_months - age_months), bp.age_months))


# =============================================================================
# CLASSIFICATION
# =============================================================================


def _validate_value(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Measurement value must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"Measurement value must be positive and finite, got {value!r}")
    return float(value)


def _validate_age(age_months: int) -> int:
    if isinstance(age_months, bool) or not isinstance(age_months, (int, float)):
        raise ValueError(f"Age in months must be an integer, got {age_months!r}")
    if not math.isfinite(age_months) or int(age_months) != age_months:
        raise ValueError(f"Age in months must be an integer, got {age_months!r}")
    # Measurements dated before birth count as newborn
    return max(0, int(age_months))


def classify_against(value: float, breakpoint: Breakpoint) -> PercentileBand:
    """Place a value among one breakpoint's boundaries."""
    if value < breakpoint.p3:
        return PercentileBand.BELOW_3RD
    if value < breakpoint.p15:
        return PercentileBand.P3_TO_P15
    if value < breakpoint.p50:
        return PercentileBand.P15_TO_P50
    if value < breakpoint.p85:
        return PercentileBand.P50_TO_P85
    if value < breakpoint.p97:
        return PercentileBand.P85_TO_P97
    return PercentileBand.ABOVE_97TH


def classify(
    value: float,
    age_months: int,
    sex: Sex,
    metric: MetricType,
    standard: Standard = "who",
) -> PercentileResult:
    """
    Classify a growth measurement into a percentile band.

    Args:
        value: Measurement in the metric's unit (cm or kg), positive
        age_months: Child's age in whole months at measurement; negative
            ages are treated as 0
        sex: "male" or "female"
        metric: "height", "weight" or "head_circumference"
        standard: "who" or "singapore"

    Returns:
        PercentileResult for the nearest tabulated age

    Raises:
        ValueError: for unknown enum values, a non-positive or non-finite
            value, or a non-integer age
    """
    table = get_reference_table(metric, sex, standard)
    value = _validate_value(value)
    age = _validate_age(age_months)

    ref = nearest_breakpoint(table, age)
    band = classify_against(value, ref)

    return PercentileResult(
        band=band,
        percentile=band.representative_percentile,
        is_within_normal_range=band.is_within_normal_range,
        range_description=band.description,
        reference_age_months=ref.age_months,
    )


# =============================================================================
# CHART CURVES
# =============================================================================


def percentile_curves(
    metric: MetricType,
    sex: Sex,
    standard: Standard = "who",
    max_age_months: int | None = None,
) -> dict[str, list[tuple[int, float]]]:
    """
    Percentile lines for charting.

    Returns p3..p97 each mapped to [(age_months, value), ...] for every
    breakpoint at or below max_age_months (all breakpoints if None).
    """
    table = get_reference_table(metric, sex, standard)
    rows = [bp for bp in table if max_age_months is None or bp.age_months <= max_age_months]
    return {
        key: [(bp.age_months, getattr(bp, key)) for bp in rows]
        for key in PERCENTILE_KEYS
    }


def boundary_at_age(
    metric: MetricType,
    sex: Sex,
    standard: Standard,
    percentile_key: str,
    age_months: float,
) -> float:
    """
    Boundary value at an arbitrary age, linear between breakpoints.

    For drawing chart lines only; classify() reads the nearest breakpoint.
    Ages outside the table are clamped to its range.
    """
    if percentile_key not in PERCENTILE_KEYS:
        raise ValueError(f"Unknown percentile {percentile_key!r}; expected one of {', '.join(PERCENTILE_KEYS)}")

    table = get_reference_table(metric, sex, standard)

    if age_months <= table[0].age_months:
        return getattr(table[0], percentile_key)
    if age_months >= table[-1].age_months:
        return getattr(table[-1], percentile_key)

    lower = max((bp for bp in table if bp.age_months <= age_months), key=lambda bp: bp.age_months)
    upper = min((bp for bp in table if bp.age_months >= age_months), key=lambda bp: bp.age_months)
    if lower.age_months == upper.age_months:
        return getattr(lower, percentile_key)

    t = (age_months - lower.age_months) / (upper.age_months - lower.age_months)
    v1 = getattr(lower, percentile_key)
    v2 = getattr(upper, percentile_key)
    return v1 + t * (v2 - v1)
