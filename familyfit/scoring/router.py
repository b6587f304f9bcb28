"""API endpoints for the scoring engine."""

from fastapi import APIRouter
from loguru import logger

from familyfit.scoring import calculator
from familyfit.scoring.calculator import calculate_scores
from familyfit.scoring.schemas import (
    HandicapRequest,
    LeaderboardRequest,
    MemberScore,
    ProgressRequest,
    ScoreRequest,
    ScoreResult,
    WeeklyHours,
    WeeklyHoursRequest,
    WeeklyProgress,
)
from familyfit.scoring.service import scoring_service
from familyfit.scoring.summary import weekly_hours, weekly_progress

router = APIRouter(
    prefix="/scoring",
    tags=["scoring"],
)


@router.get("/rules")
async def get_scoring_rules():
    """Get the scoring constants used by the engine."""
    return {
        "points_per_hour": calculator.POINTS_PER_HOUR,
        "reduced_points_per_hour": calculator.REDUCED_POINTS_PER_HOUR,
        "reduced_rate_sports": sorted(calculator.REDUCED_RATE_SPORTS),
        "bonus_threshold_factor": calculator.BONUS_THRESHOLD_FACTOR,
        "bonus_premium": calculator.BONUS_PREMIUM,
        "race_points": calculator.RACE_POINTS,
        "golf_tournament_points": calculator.GOLF_TOURNAMENT_POINTS,
        "poptart_penalty": calculator.POPTART_PENALTY,
        "wine_penalty": calculator.WINE_PENALTY,
    }


@router.post("/calculate", response_model=ScoreResult)
async def calculate(body: ScoreRequest):
    """Score one member's activities.

    Parameters
    ----------
    body : ScoreRequest
        Activities and scoring config (handicap, target, year, penalty counts)

    Returns
    -------
    ScoreResult
        Weekly breakdown and season total
    """
    logger.debug(
        "Calculating scores",
        activities=len(body.activities),
        year=body.config.selected_year,
    )
    return calculate_scores(body.activities, body.config)


@router.post("/handicaps", response_model=dict[str, float])
async def handicaps(body: HandicapRequest):
    """Derive handicaps for a roster from its weekly targets."""
    return scoring_service.roster_handicaps(body.members)


@router.post("/leaderboard", response_model=list[MemberScore])
async def leaderboard(body: LeaderboardRequest):
    """Score and rank every member of the roster for the selected year.

    Raises
    ------
    InvalidPenalty
        Mapped to 422 if a member's penalty log breaks the logging rules
    """
    return scoring_service.leaderboard(body.members, body.selected_year)


@router.post("/progress", response_model=WeeklyProgress)
async def progress(body: ProgressRequest):
    """Get progress toward the weekly target for the week containing ``today``."""
    return weekly_progress(body.activities, body.weekly_target_hours, body.today)


@router.post("/weekly-hours", response_model=list[WeeklyHours])
async def hours_by_week(body: WeeklyHoursRequest):
    """Get raw and adjusted training hours per week of the selected year.

    Weeks run from the first activity of the year through ``through`` (or
    year end), empty weeks included.
    """
    return weekly_hours(body.activities, body.selected_year, body.through)
