import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from lifetrack.models.enums import ExerciseIntensity, ExerciseType
from .mappings import (
    INTENSITY_BASE_POINTS,
    INTENSITY_COUNT_THRESHOLD,
    INTENSITY_HIGH_POINTS,
    INTENSITY_MEDIUM_POINTS,
    INTENSITY_MIN_ACTIVITIES,
    RATING_BANDS,
    TRACKED_VARIETY_TYPES,
    VARIETY_MAX_POINTS,
    VARIETY_POINTS,
    VOLUME_BANDS,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class Rating(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class ActivityFacts:
    """What the engine needs to know about one logged activity.

    Both fields are None when the activity's exercise could not be resolved.
    Raw strings are accepted so values read from storage can be passed through
    unchanged; anything outside the known enumerations is ignored.
    """
    exercise_type: Optional[Any] = None
    exercise_intensity: Optional[Any] = None


@dataclass(frozen=True)
class RatingResult:
    points: int
    rating: Rating
    volume: int
    intensity: int
    variety: int
    activity_count: int

    def as_dict(self) -> Dict[str, Any]:
        return {"points": self.points, "rating": self.rating.value}


def _coerce(enum_cls: Type[E], value: Any) -> Optional[E]:
    """Map a raw value onto an enum member, or None when unrecognized."""
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    lookup = {member.value: member for member in enum_cls}
    return lookup.get(value.strip().lower())


def volume_points(count: int) -> int:
    for minimum, points in VOLUME_BANDS:
        if count >= minimum:
            return points
    return 0


def intensity_points(count: int, intensities: Dict[ExerciseIntensity, int]) -> int:
    if count < INTENSITY_MIN_ACTIVITIES:
        return 0
    high = intensities[ExerciseIntensity.HIGH]
    medium = intensities[ExerciseIntensity.MEDIUM]
    if high >= INTENSITY_COUNT_THRESHOLD:
        return INTENSITY_HIGH_POINTS
    if high + medium >= INTENSITY_COUNT_THRESHOLD:
        return INTENSITY_MEDIUM_POINTS
    return INTENSITY_BASE_POINTS


def variety_points(distinct_types: int) -> int:
    return VARIETY_POINTS.get(distinct_types, VARIETY_MAX_POINTS)


def rating_for(points: int) -> Rating:
    for minimum, value in RATING_BANDS:
        if points >= minimum:
            return Rating(value)
    return Rating.NONE


def compute_rating(activities: Iterable[ActivityFacts]) -> RatingResult:
    """Score one day of activities.

    Three considerations are summed: how many activities were logged, how
    intense they were (only once there are enough of them) and how many of the
    tracked exercise types they cover. Activities with an unresolved exercise or
    unknown enum values still count toward volume but nowhere else.
    """
    intensities: Dict[ExerciseIntensity, int] = {member: 0 for member in ExerciseIntensity}
    types: Dict[ExerciseType, int] = {member: 0 for member in TRACKED_VARIETY_TYPES}

    count = 0
    unresolved = 0
    for activity in activities:
        count += 1
        intensity = _coerce(ExerciseIntensity, activity.exercise_intensity)
        if intensity is not None:
            intensities[intensity] += 1
        exercise_type = _coerce(ExerciseType, activity.exercise_type)
        if exercise_type in types:
            types[exercise_type] += 1
        if intensity is None and exercise_type is None:
            unresolved += 1

    if unresolved:
        logger.warning(f"{unresolved} of {count} activities have no recognizable exercise; counted for volume only")

    volume = volume_points(count)
    logger.debug(f"Number of activities: {count}, volume points: {volume}")

    intensity = intensity_points(count, intensities)
    tally = {k.value: v for k, v in intensities.items()}
    logger.debug(f"Intensity tally: {tally}, intensity points: {intensity}")

    distinct_types = sum(1 for tally in types.values() if tally > 0)
    variety = variety_points(distinct_types)
    logger.debug(f"Distinct tracked exercise types: {distinct_types}, variety points: {variety}")

    points = volume + intensity + variety
    rating = rating_for(points)
    logger.debug(f"Total points: {points}, rating: {rating.value}")

    return RatingResult(
        points=points,
        rating=rating,
        volume=volume,
        intensity=intensity,
        variety=variety,
        activity_count=count,
    )
