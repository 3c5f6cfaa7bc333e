"""
Singapore national growth reference, 0-24 months.

Simplified key-age boundaries following the Health Promotion Board
percentile charts. The Singapore curves sit slightly below the WHO
standard at most ages, so a measurement near a boundary can land in a
different band depending on the chosen standard.

Format: age_months -> (p3, p15, p50, p85, p97)
"""

from __future__ import annotations

# Length/height-for-age (cm), Males
HEIGHT_FOR_AGE_MALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (45.8, 47.5, 49.5, 51.4, 53.2),
    3: (56.8, 58.8, 60.8, 62.9, 64.9),
    6: (62.8, 64.9, 67.0, 69.2, 71.3),
    9: (67.5, 69.5, 71.4, 73.6, 75.9),
    12: (70.5, 72.8, 75.1, 77.5, 79.9),
    18: (76.3, 79.0, 81.7, 84.4, 87.1),
    24: (81.1, 84.0, 87.2, 90.4, 93.4),
}

# Length/height-for-age (cm), Females
HEIGHT_FOR_AGE_FEMALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (45.1, 46.9, 48.7, 50.6, 52.5),
    3: (55.1, 57.1, 59.2, 61.3, 63.4),
    6: (60.7, 62.9, 65.1, 67.3, 69.5),
    9: (65.2, 67.4, 69.5, 71.8, 74.1),
    12: (68.4, 70.8, 73.4, 76.0, 78.6),
    18: (74.4, 77.2, 80.1, 83.0, 85.9),
    24: (79.5, 82.6, 85.8, 89.0, 92.3),
}

# Weight-for-age (kg), Males
WEIGHT_FOR_AGE_MALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (2.5, 2.9, 3.2, 3.8, 4.3),
    3: (4.9, 5.5, 6.2, 7.0, 7.8),
    6: (6.2, 6.9, 7.7, 8.6, 9.5),
    9: (7.0, 7.8, 8.7, 9.7, 10.7),
    12: (7.6, 8.4, 9.4, 10.5, 11.7),
    18: (8.4, 9.5, 10.6, 11.9, 13.4),
    24: (9.5, 10.6, 11.9, 13.3, 14.9),
}

# Weight-for-age (kg), Females
WEIGHT_FOR_AGE_FEMALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (2.4, 2.7, 3.1, 3.6, 4.1),
    3: (4.4, 5.0, 5.6, 6.4, 7.3),
    6: (5.6, 6.3, 7.1, 8.0, 9.1),
    9: (6.4, 7.2, 8.0, 9.1, 10.2),
    12: (6.9, 7.7, 8.7, 9.9, 11.2),
    18: (7.7, 8.8, 9.9, 11.3, 12.9),
    24: (8.8, 10.0, 11.2, 12.7, 14.4),
}

# Head circumference-for-age (cm), Males
HC_FOR_AGE_MALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (31.9, 32.9, 34.3, 35.6, 36.7),
    3: (38.0, 39.0, 40.2, 41.4, 42.4),
    6: (40.9, 41.9, 43.0, 44.3, 45.3),
    9: (42.7, 43.7, 44.9, 46.1, 47.1),
    12: (44.0, 45.0, 46.2, 47.4, 48.3),
    18: (45.5, 46.5, 47.7, 48.9, 49.9),
    24: (46.6, 47.6, 48.7, 49.9, 50.9),
}

# Head circumference-for-age (cm), Females
HC_FOR_AGE_FEMALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (31.3, 32.2, 33.7, 34.9, 35.8),
    3: (37.1, 38.0, 39.2, 40.4, 41.4),
    6: (40.0, 40.9, 42.1, 43.2, 44.1),
    9: (41.7, 42.6, 43.7, 44.9, 45.8),
    12: (42.9, 43.8, 45.1, 46.2, 47.2),
    18: (44.4, 45.3, 46.5, 47.7, 48.7),
    24: (45.5, 46.4, 47.5, 48.7, 49.7),
}
