"""Scoring tables for the daily activity rating.

Kept apart from the engine so the bands can be read (and reviewed) in one
place without touching the compute logic.
"""

from typing import Dict, List, Tuple

from lifetrack.models.enums import ExerciseType

# Consideration 1: number of activities. (minimum count, points), highest band first.
VOLUME_BANDS: List[Tuple[int, int]] = [
    (13, 40),
    (9, 30),
    (5, 20),
    (1, 10),
]

# Consideration 2: intensity. Only scored once a day has this many activities.
INTENSITY_MIN_ACTIVITIES = 5
INTENSITY_COUNT_THRESHOLD = 10
INTENSITY_HIGH_POINTS = 30  # high >= threshold
INTENSITY_MEDIUM_POINTS = 20  # high + medium >= threshold
INTENSITY_BASE_POINTS = 10

# Consideration 3: variety. Trekking is not tracked.
TRACKED_VARIETY_TYPES: Tuple[ExerciseType, ...] = (
    ExerciseType.WEIGHT,
    ExerciseType.CARDIO,
    ExerciseType.SPORT,
    ExerciseType.YOGA,
    ExerciseType.BODY_WEIGHT,
)
VARIETY_POINTS: Dict[int, int] = {
    0: 0,
    1: 5,
    2: 10,
    3: 20,
}
VARIETY_MAX_POINTS = 30  # more than three distinct types

# Final classification: (minimum points, rating value), highest band first.
RATING_BANDS: List[Tuple[int, str]] = [
    (75, "high"),
    (30, "medium"),
    (1, "low"),
]
