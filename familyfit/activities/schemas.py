"""Pydantic schemas for activities.

``Activity`` is the normalized record the scoring engine consumes.
``StravaActivitySchema`` is the raw provider payload it is built from.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkoutType(str, Enum):
    """How an activity is scored."""

    TRAINING = "training"
    RACE = "race"
    GOLF_TOURNAMENT = "golf_tournament"


class Activity(BaseModel):
    """A single activity as seen by the scoring engine.

    Attributes
    ----------
    type : str
        Sport discipline ("Run", "Ride", "Golf", ...). Compared lowercased.
    workout_type : WorkoutType
        Scoring category. Missing or empty values mean training.
    moving_time_seconds : int
        Active time in seconds; the only duration used for scoring
    start_date : datetime
        UTC start instant. Naive values are taken as UTC.
    start_date_local : datetime
        Wall-clock start time in the activity's own timezone
    id : int | None
        Provider activity ID
    name : str | None
        Activity title
    elapsed_time_seconds : int | None
        Total elapsed time (informational only)
    timezone : str | None
        Provider timezone label
    """

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    type: str
    workout_type: WorkoutType = WorkoutType.TRAINING
    moving_time_seconds: int = Field(ge=0)
    start_date: datetime
    start_date_local: datetime

    id: Optional[int] = None
    name: Optional[str] = None
    elapsed_time_seconds: Optional[int] = None
    timezone: Optional[str] = None

    @field_validator("workout_type", mode="before")
    @classmethod
    def default_workout_type(cls, value: Any) -> Any:
        if value is None or value == "":
            return WorkoutType.TRAINING
        return value

    @field_validator("start_date")
    @classmethod
    def normalize_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @property
    def sport(self) -> str:
        """Lowercased discipline used for rate and triathlon matching."""
        return self.type.lower()

    @property
    def hours(self) -> float:
        return self.moving_time_seconds / 3600


class StravaActivitySchema(BaseModel):
    """Activity summary as returned by the Strava API."""

    id: int
    name: str
    type: str
    sport_type: Optional[str] = None
    moving_time: int
    elapsed_time: int
    start_date: datetime
    start_date_local: datetime
    timezone: Optional[str] = None
    distance: Optional[float] = None
    workout_type: Optional[int] = None  # 1=run race, 11=ride race, others=training
