import logging
import random

import pytest

from lifetrack.activity_rating.engine import (
    ActivityFacts,
    Rating,
    compute_rating,
    intensity_points,
    rating_for,
    variety_points,
    volume_points,
)
from lifetrack.models.enums import ExerciseIntensity, ExerciseType


def facts(exercise_type, exercise_intensity, n=1):
    return [ActivityFacts(exercise_type=exercise_type, exercise_intensity=exercise_intensity) for _ in range(n)]


@pytest.mark.parametrize(
    "count,expected",
    [(0, 0), (1, 10), (4, 10), (5, 20), (8, 20), (9, 30), (12, 30), (13, 40), (40, 40)],
)
def test_volume_points_bands(count, expected):
    assert volume_points(count) == expected


@pytest.mark.parametrize(
    "points,expected",
    [(0, Rating.NONE), (1, Rating.LOW), (29, Rating.LOW), (30, Rating.MEDIUM), (74, Rating.MEDIUM), (75, Rating.HIGH), (100, Rating.HIGH)],
)
def test_rating_bands(points, expected):
    assert rating_for(points) == expected


def test_variety_points_caps_above_three_types():
    assert [variety_points(n) for n in range(6)] == [0, 5, 10, 20, 30, 30]


def test_intensity_not_scored_below_five_activities():
    tally = {ExerciseIntensity.LOW: 0, ExerciseIntensity.MEDIUM: 0, ExerciseIntensity.HIGH: 4}
    assert intensity_points(4, tally) == 0


def test_intensity_base_points_once_scored():
    tally = {ExerciseIntensity.LOW: 5, ExerciseIntensity.MEDIUM: 0, ExerciseIntensity.HIGH: 0}
    assert intensity_points(5, tally) == 10


def test_no_activities_rates_none():
    result = compute_rating([])
    assert result.as_dict() == {"points": 0, "rating": "none"}
    assert result.activity_count == 0


def test_three_light_cardio_sessions():
    result = compute_rating(facts("cardio", "low", 3))
    assert (result.volume, result.intensity, result.variety) == (10, 0, 5)
    assert result.as_dict() == {"points": 15, "rating": "low"}


def test_six_activities_across_cardio_and_yoga():
    result = compute_rating(facts("cardio", "high", 4) + facts("yoga", "medium", 2))
    assert (result.volume, result.intensity, result.variety) == (20, 10, 10)
    assert result.as_dict() == {"points": 40, "rating": "medium"}


def test_five_mixed_activities():
    activities = (
        facts("weight", "medium", 2)
        + facts("cardio", "medium", 2)
        + facts("yoga", "low")
    )
    result = compute_rating(activities)
    # 20 volume, 10 intensity (high + medium = 4), 20 variety (3 types)
    assert (result.volume, result.intensity, result.variety) == (20, 10, 20)
    assert result.as_dict() == {"points": 50, "rating": "medium"}


def test_nine_activities_below_intensity_threshold():
    activities = facts("cardio", "high", 4) + facts("yoga", "medium", 5)
    result = compute_rating(activities)
    # high + medium = 9, still under ten
    assert (result.volume, result.intensity, result.variety) == (30, 10, 10)
    assert result.as_dict() == {"points": 50, "rating": "medium"}


def test_thirteen_intense_varied_activities():
    activities = (
        facts("weight", "high", 4)
        + facts("cardio", "high", 3)
        + facts("sport", "high", 3)
        + facts("yoga", "medium", 3)
    )
    result = compute_rating(activities)
    assert (result.volume, result.intensity, result.variety) == (40, 30, 30)
    assert result.as_dict() == {"points": 100, "rating": "high"}


def test_ten_medium_or_high_activities_score_medium_intensity():
    activities = facts("body-weight", "medium", 6) + facts("weight", "high", 4)
    result = compute_rating(activities)
    assert (result.volume, result.intensity, result.variety) == (30, 20, 10)
    assert result.points == 60
    assert result.rating == Rating.MEDIUM


def test_trekking_does_not_count_toward_variety():
    result = compute_rating(facts("trekking", "medium", 2))
    assert result.variety == 0
    assert result.as_dict() == {"points": 10, "rating": "low"}


def test_unresolved_exercise_counts_for_volume_only(caplog):
    activities = [ActivityFacts()] * 3 + facts("weight", "high", 2)
    with caplog.at_level(logging.WARNING, logger="lifetrack.activity_rating.engine"):
        result = compute_rating(activities)
    assert result.activity_count == 5
    assert (result.volume, result.intensity, result.variety) == (20, 10, 5)
    assert "3 of 5 activities" in caplog.text


def test_unknown_enum_values_are_ignored():
    activities = facts("skydiving", "extreme", 5) + facts(42, None)
    result = compute_rating(activities)
    assert result.activity_count == 6
    assert (result.volume, result.intensity, result.variety) == (20, 10, 0)


def test_values_are_matched_case_insensitively():
    result = compute_rating(facts("  Cardio", "HIGH", 10))
    assert (result.intensity, result.variety) == (30, 5)


def test_enum_members_are_accepted():
    result = compute_rating(facts(ExerciseType.BODY_WEIGHT, ExerciseIntensity.HIGH, 5))
    assert (result.volume, result.intensity, result.variety) == (20, 10, 5)


def test_result_does_not_depend_on_order():
    activities = (
        facts("weight", "high", 4)
        + facts("cardio", "low", 3)
        + facts("sport", "medium", 3)
        + [ActivityFacts()]
    )
    expected = compute_rating(activities)
    shuffled = list(activities)
    random.Random(7).shuffle(shuffled)
    assert compute_rating(shuffled) == expected
    assert compute_rating(reversed(activities)) == expected


def test_accepts_a_generator():
    result = compute_rating(ActivityFacts("yoga", "low") for _ in range(9))
    assert result.activity_count == 9
    assert result.volume == 30
