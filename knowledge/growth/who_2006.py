"""
WHO Child Growth Standards (2006), 0-24 months.

Reference: https://www.who.int/tools/child-growth-standards

Values are the measurement at each percentile for the given age, read from
the WHO Multicentre Growth Reference Study tables and rounded to one
decimal place. Only key ages are sampled; classification reads the nearest
tabulated age rather than interpolating.

Format: age_months -> (p3, p15, p50, p85, p97)
"""

from __future__ import annotations

# Length/height-for-age (cm), Males
HEIGHT_FOR_AGE_MALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (46.1, 47.9, 49.9, 51.8, 53.7),
    3: (57.3, 59.4, 61.4, 63.5, 65.5),
    6: (63.3, 65.5, 67.6, 69.8, 71.9),
    9: (68.0, 70.1, 72.0, 74.2, 76.5),
    12: (71.0, 73.4, 75.7, 78.1, 80.5),
    18: (76.9, 79.6, 82.3, 85.0, 87.7),
    24: (81.7, 84.6, 87.8, 91.0, 94.0),
}

# Length/height-for-age (cm), Females
HEIGHT_FOR_AGE_FEMALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (45.4, 47.3, 49.1, 51.0, 52.9),
    3: (55.6, 57.7, 59.8, 61.9, 64.0),
    6: (61.2, 63.5, 65.7, 67.9, 70.1),
    9: (65.7, 68.0, 70.1, 72.4, 74.7),
    12: (68.9, 71.4, 74.0, 76.6, 79.2),
    18: (74.9, 77.8, 80.7, 83.6, 86.5),
    24: (80.0, 83.2, 86.4, 89.6, 92.9),
}

# Weight-for-age (kg), Males
WEIGHT_FOR_AGE_MALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (2.5, 2.9, 3.3, 3.9, 4.4),
    3: (5.0, 5.7, 6.4, 7.2, 8.0),
    6: (6.4, 7.1, 7.9, 8.8, 9.8),
    9: (7.1, 8.0, 8.9, 9.9, 11.0),
    12: (7.7, 8.6, 9.6, 10.8, 12.0),
    18: (8.6, 9.7, 10.9, 12.2, 13.7),
    24: (9.7, 10.8, 12.2, 13.6, 15.3),
}

# Weight-for-age (kg), Females
WEIGHT_FOR_AGE_FEMALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (2.4, 2.8, 3.2, 3.7, 4.2),
    3: (4.5, 5.2, 5.8, 6.6, 7.5),
    6: (5.7, 6.5, 7.3, 8.2, 9.3),
    9: (6.5, 7.3, 8.2, 9.3, 10.5),
    12: (7.0, 7.9, 8.9, 10.1, 11.5),
    18: (7.9, 9.0, 10.2, 11.6, 13.2),
    24: (9.0, 10.2, 11.5, 13.0, 14.8),
}

# Head circumference-for-age (cm), Males
HC_FOR_AGE_MALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (32.1, 33.1, 34.5, 35.8, 36.9),
    3: (38.3, 39.3, 40.5, 41.7, 42.7),
    6: (41.0, 42.0, 43.3, 44.6, 45.6),
    9: (43.0, 44.0, 45.2, 46.5, 47.4),
    12: (44.2, 45.3, 46.5, 47.7, 48.6),
    18: (45.7, 46.8, 48.0, 49.2, 50.1),
    24: (46.6, 47.6, 48.9, 50.2, 51.1),
}

# Head circumference-for-age (cm), Females
HC_FOR_AGE_FEMALE: dict[int, tuple[float, float, float, float, float]] = {
    0: (31.5, 32.4, 33.9, 35.1, 36.1),
    3: (37.1, 38.1, 39.5, 40.8, 41.8),
    6: (39.6, 40.6, 42.0, 43.4, 44.4),
    9: (41.3, 42.4, 43.8, 45.1, 46.1),
    12: (42.5, 43.5, 44.9, 46.3, 47.3),
    18: (43.8, 44.9, 46.3, 47.7, 48.6),
    24: (44.8, 45.9, 47.2, 48.6, 49.6),
}
