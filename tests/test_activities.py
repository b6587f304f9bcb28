"""
Unit tests for activity normalization.
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from familyfit.activities.classifier import activity_from_strava, map_strava_workout_type
from familyfit.activities.schemas import Activity, StravaActivitySchema, WorkoutType


def strava_payload(**overrides) -> StravaActivitySchema:
    data = {
        "id": 987654321,
        "name": "Morning Run",
        "type": "Run",
        "sport_type": "Run",
        "moving_time": 3000,
        "elapsed_time": 3300,
        "start_date": "2025-03-08T14:00:00Z",
        "start_date_local": "2025-03-08T06:00:00Z",
        "timezone": "(GMT-08:00) America/Los_Angeles",
        "distance": 10000.0,
        "workout_type": None,
    }
    data.update(overrides)
    return StravaActivitySchema.model_validate(data)


class TestWorkoutTypeMapping:
    """Test Strava workout_type classification."""

    @pytest.mark.parametrize("code,activity_type", [(1, "Run"), (11, "Ride")])
    def test_race_codes(self, code, activity_type):
        assert map_strava_workout_type(code, activity_type) is WorkoutType.RACE

    @pytest.mark.parametrize("code", [None, 0, 2, 3, 10, 12])
    def test_everything_else_is_training(self, code):
        assert map_strava_workout_type(code, "Run") is WorkoutType.TRAINING

    def test_golf_is_never_auto_tournament(self):
        assert map_strava_workout_type(None, "Golf") is WorkoutType.TRAINING


class TestActivityFromStrava:
    def test_maps_fields(self):
        activity = activity_from_strava(strava_payload())
        assert activity.id == 987654321
        assert activity.type == "Run"
        assert activity.moving_time_seconds == 3000
        assert activity.elapsed_time_seconds == 3300
        assert activity.workout_type is WorkoutType.TRAINING
        assert activity.start_date == datetime(2025, 3, 8, 14, tzinfo=timezone.utc)
        assert activity.start_date_local.date().isoformat() == "2025-03-08"

    def test_race_payload(self):
        activity = activity_from_strava(strava_payload(type="Ride", workout_type=11))
        assert activity.workout_type is WorkoutType.RACE


class TestActivitySchema:
    """Test boundary validation of scoring records."""

    def base(self, **overrides):
        data = {
            "type": "Run",
            "moving_time_seconds": 1800,
            "start_date": "2025-03-08T14:00:00Z",
            "start_date_local": "2025-03-08T06:00:00",
        }
        data.update(overrides)
        return data

    def test_missing_workout_type_defaults_to_training(self):
        assert Activity.model_validate(self.base()).workout_type is WorkoutType.TRAINING

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_workout_type_defaults_to_training(self, value):
        activity = Activity.model_validate(self.base(workout_type=value))
        assert activity.workout_type is WorkoutType.TRAINING

    def test_string_workout_type(self):
        activity = Activity.model_validate(self.base(workout_type="golf_tournament"))
        assert activity.workout_type is WorkoutType.GOLF_TOURNAMENT

    def test_unknown_workout_type_rejected(self):
        with pytest.raises(ValidationError):
            Activity.model_validate(self.base(workout_type="long_run"))

    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            Activity.model_validate(self.base(moving_time_seconds=-1))

    def test_naive_start_date_is_utc(self):
        activity = Activity.model_validate(self.base(start_date="2025-03-08T14:00:00"))
        assert activity.start_date.tzinfo == timezone.utc

    def test_offset_start_date_converted_to_utc(self):
        activity = Activity.model_validate(self.base(start_date="2025-03-08T23:30:00-05:00"))
        assert activity.start_date == datetime(2025, 3, 9, 4, 30, tzinfo=timezone.utc)

    def test_activity_is_immutable(self):
        activity = Activity.model_validate(self.base())
        with pytest.raises(ValidationError):
            activity.moving_time_seconds = 10
