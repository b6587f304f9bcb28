"""Normalize provider activities into scoring records."""

import logging
from typing import Optional

from familyfit.activities.schemas import Activity, StravaActivitySchema, WorkoutType

logger = logging.getLogger(__name__)

# Strava workout_type codes: 1 = race (run), 11 = race (ride)
STRAVA_RACE_CODES = frozenset({1, 11})


def map_strava_workout_type(
    strava_workout_type: Optional[int], activity_type: str
) -> WorkoutType:
    """Map Strava's numeric workout type onto our scoring categories.

    Parameters
    ----------
    strava_workout_type : int | None
        Strava ``workout_type`` code (may be missing)
    activity_type : str
        Strava activity type, e.g. "Run"

    Returns
    -------
    WorkoutType
        ``RACE`` for the race codes, ``TRAINING`` for everything else

    Notes
    -----
    Strava has no golf tournament flag, so ``GOLF_TOURNAMENT`` is only ever
    set by manual tagging and never produced here.
    """
    if strava_workout_type in STRAVA_RACE_CODES:
        return WorkoutType.RACE
    return WorkoutType.TRAINING


def activity_from_strava(payload: StravaActivitySchema) -> Activity:
    """Build a scoring ``Activity`` from a Strava activity payload."""
    workout_type = map_strava_workout_type(payload.workout_type, payload.type)
    if workout_type is WorkoutType.RACE:
        logger.debug(f"Activity {payload.id} classified as race ({payload.type})")

    return Activity(
        id=payload.id,
        name=payload.name,
        type=payload.type,
        workout_type=workout_type,
        moving_time_seconds=payload.moving_time,
        elapsed_time_seconds=payload.elapsed_time,
        start_date=payload.start_date,
        start_date_local=payload.start_date_local,
        timezone=payload.timezone,
    )
