"""Activity records and provider normalization."""

from familyfit.activities.classifier import activity_from_strava, map_strava_workout_type
from familyfit.activities.schemas import Activity, StravaActivitySchema, WorkoutType

__all__ = [
    "Activity",
    "StravaActivitySchema",
    "WorkoutType",
    "activity_from_strava",
    "map_strava_workout_type",
]
