"""Pydantic schemas for scoring inputs and results."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from familyfit.activities.schemas import Activity
from familyfit.config import get_settings
from familyfit.penalties.schemas import PenaltyEvent


def default_weekly_target() -> float:
    return get_settings().DEFAULT_WEEKLY_TARGET_HOURS


class ScoringConfig(BaseModel):
    """Per-member scoring parameters.

    Attributes
    ----------
    handicap : float
        Multiplier applied to training and bonus points (1.0 = no adjustment)
    weekly_target_hours : float
        Weekly goal in adjusted hours; the bonus threshold is 125% of it
    selected_year : int
        Calendar year (UTC) whose activities are scored
    poptart_count : int
        Total poptarts logged (not week-scoped)
    wine_glasses : int
        Total glasses of wine logged (not week-scoped)
    """

    model_config = ConfigDict(frozen=True)

    handicap: float = Field(gt=0)
    weekly_target_hours: float = Field(gt=0)
    selected_year: int
    poptart_count: int = Field(default=0, ge=0)
    wine_glasses: int = Field(default=0, ge=0)


class WeeklyScore(BaseModel):
    """Points earned in one Monday-start week.

    ``total_points`` is the sum of the rounded components, rounded to one
    decimal. Penalties are only applied to the season total, so the penalty
    fields here are always zero.
    """

    week_start: str
    training_points: float
    bonus_points: float
    race_points: int
    golf_tournament_points: int
    poptart_penalty: float = 0
    wine_penalty: float = 0
    total_points: float


class ScoreResult(BaseModel):
    """Season score for one member."""

    weekly_scores: list[WeeklyScore]
    total_score: float
    poptart_penalty: float
    wine_penalty: float


class CumulativePoint(BaseModel):
    """Running total after a given week."""

    week_start: str
    points: float


class SportHours(BaseModel):
    """Training hours and points for one sport."""

    sport: str
    hours: float
    is_reduced_rate: bool
    points: float


class WeeklyHours(BaseModel):
    """Training hours for one week of the hours chart.

    Attributes
    ----------
    week_start : str
        Monday of the week in YYYY-MM-DD format
    raw_hours : float
        Training hours before sport rate adjustment
    adjusted_hours : float
        Training hours after sport rate adjustment
    discount_hours : float
        Hours lost to reduced-rate sports (raw minus adjusted)
    race_points : int
        Race points earned that week
    """

    week_start: str
    raw_hours: float
    adjusted_hours: float
    discount_hours: float
    race_points: int


class WeeklyProgress(BaseModel):
    """Progress toward the weekly target for the current week.

    Attributes
    ----------
    week_start : str
        Monday of the week in YYYY-MM-DD format
    raw_hours : float
        Training hours before sport rate adjustment
    adjusted_hours : float
        Training hours after sport rate adjustment
    workout_count : int
        Number of training activities this week
    target_hours : float
        Weekly target
    bonus_threshold_hours : float
        Hours at which the bonus starts
    hours_remaining : float
        Adjusted hours still needed to reach the target (never negative)
    target_met : bool
        Whether adjusted hours reached the target
    bonus_earned : bool
        Whether adjusted hours reached the bonus threshold
    days_remaining : int
        Days left in the week after today (0 on Sunday)
    hours_per_day_needed : float
        Remaining hours spread over today and the days left
    """

    week_start: str
    raw_hours: float
    adjusted_hours: float
    workout_count: int
    target_hours: float
    bonus_threshold_hours: float
    hours_remaining: float
    target_met: bool
    bonus_earned: bool
    days_remaining: int
    hours_per_day_needed: float


class ScoreRequest(BaseModel):
    activities: list[Activity]
    config: ScoringConfig


class RosterMember(BaseModel):
    """One family member as submitted for handicap derivation or ranking."""

    name: str
    weekly_target_hours: float = Field(default_factory=default_weekly_target, gt=0)
    handicap: Optional[float] = Field(default=None, gt=0)
    activities: list[Activity] = Field(default_factory=list)
    penalties: list[PenaltyEvent] = Field(default_factory=list)


class HandicapRequest(BaseModel):
    members: list[RosterMember]


class LeaderboardRequest(BaseModel):
    members: list[RosterMember]
    selected_year: int


class ProgressRequest(BaseModel):
    activities: list[Activity]
    weekly_target_hours: float = Field(default_factory=default_weekly_target, gt=0)
    today: date


class WeeklyHoursRequest(BaseModel):
    activities: list[Activity]
    selected_year: int
    through: Optional[date] = None


class MemberScore(BaseModel):
    """Leaderboard entry for one member.

    Attributes
    ----------
    name : str
        Member name
    handicap : float
        Handicap the score was computed with
    weekly_target_hours : float
        Member's weekly target
    training_points : float
        Season training points (sum of weekly values)
    bonus_points : float
        Season bonus points (sum of weekly values)
    race_points : int
        Season race points
    golf_tournament_points : int
        Season golf tournament points
    result : ScoreResult
        Full weekly breakdown and total
    cumulative : list[CumulativePoint]
        Running total per week
    """

    name: str
    handicap: float
    weekly_target_hours: float
    training_points: float
    bonus_points: float
    race_points: int
    golf_tournament_points: int
    result: ScoreResult
    cumulative: list[CumulativePoint]
