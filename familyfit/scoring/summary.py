"""Derived views over activities and weekly scores.

Cards and charts read these instead of re-deriving points themselves, so the
numbers always match ``calculate_scores``.
"""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from typing import Optional

from familyfit.activities.schemas import Activity
from familyfit.scoring.calculator import (
    BONUS_THRESHOLD_FACTOR,
    REDUCED_RATE_SPORTS,
    bucket_by_week,
    calculate_adjusted_hours,
    calculate_race_points,
    is_training,
    rate_multiplier,
    round_half_up,
    week_key,
    week_start,
)
from familyfit.scoring.schemas import (
    CumulativePoint,
    SportHours,
    WeeklyHours,
    WeeklyProgress,
    WeeklyScore,
)


def cumulative_points(weekly_scores: Sequence[WeeklyScore]) -> list[CumulativePoint]:
    """Running season total after each scored week.

    Weekly totals already include the handicap; it is not applied again.
    """
    series: list[CumulativePoint] = []
    running = 0.0
    for week in weekly_scores:
        running += week.total_points
        series.append(
            CumulativePoint(week_start=week.week_start, points=round_half_up(running, 1))
        )
    return series


def sport_breakdown(
    activities: Iterable[Activity], handicap: float, year: int
) -> list[SportHours]:
    """Training hours and handicapped points per sport for one year.

    Parameters
    ----------
    activities : Iterable[Activity]
        Member's activities; races and tournaments are ignored
    handicap : float
        Member's handicap
    year : int
        Calendar year (UTC ``start_date``)

    Returns
    -------
    list[SportHours]
        One entry per activity type, most hours first
    """
    hours_by_sport: dict[str, float] = {}
    for activity in activities:
        if activity.start_date.year != year or not is_training(activity):
            continue
        hours_by_sport[activity.type] = hours_by_sport.get(activity.type, 0.0) + activity.hours

    breakdown = [
        SportHours(
            sport=sport,
            hours=round_half_up(hours, 1),
            is_reduced_rate=sport.lower() in REDUCED_RATE_SPORTS,
            points=round_half_up(hours * rate_multiplier(sport) * handicap, 1),
        )
        for sport, hours in hours_by_sport.items()
    ]
    breakdown.sort(key=lambda s: s.hours, reverse=True)
    return breakdown


def weekly_progress(
    activities: Iterable[Activity], weekly_target_hours: float, today: date
) -> WeeklyProgress:
    """Progress toward the weekly target for the week containing ``today``.

    Weeks are matched with the same UTC ``start_date`` Monday key as the
    scoring engine.
    """
    current_week = week_key(today)
    this_week = [
        a for a in activities if is_training(a) and week_key(a.start_date) == current_week
    ]

    raw_hours = sum((a.hours for a in this_week), 0.0)
    adjusted_hours = calculate_adjusted_hours(this_week)
    hours_remaining = max(0.0, weekly_target_hours - adjusted_hours)
    days_remaining = 6 - today.weekday()

    return WeeklyProgress(
        week_start=current_week,
        raw_hours=round_half_up(raw_hours, 2),
        adjusted_hours=round_half_up(adjusted_hours, 2),
        workout_count=len(this_week),
        target_hours=weekly_target_hours,
        bonus_threshold_hours=weekly_target_hours * BONUS_THRESHOLD_FACTOR,
        hours_remaining=round_half_up(hours_remaining, 2),
        target_met=adjusted_hours >= weekly_target_hours,
        bonus_earned=adjusted_hours >= weekly_target_hours * BONUS_THRESHOLD_FACTOR,
        days_remaining=days_remaining,
        hours_per_day_needed=round_half_up(hours_remaining / (days_remaining + 1), 2),
    )


def weekly_hours(
    activities: Iterable[Activity], year: int, through: Optional[date] = None
) -> list[WeeklyHours]:
    """Raw and rate-adjusted training hours for every week of a year.

    Parameters
    ----------
    activities : Iterable[Activity]
        Member's activities, any order and workout type
    year : int
        Calendar year (UTC ``start_date``)
    through : date, optional
        Last day to cover, usually today for the running year. Defaults to
        Dec 31 of ``year`` and never reaches past it.

    Returns
    -------
    list[WeeklyHours]
        One entry per week from the week of the year's first activity up to
        the week containing ``through``, empty weeks included. Empty when the
        year has no activities.

    Notes
    -----
    Weeks use the same UTC ``start_date`` Monday key as ``calculate_scores``
    and race points come from ``calculate_race_points``, so triathlon days
    chart the same 10 points they score.
    """
    weeks = bucket_by_week(activities, year)
    if not weeks:
        return []

    last_day = date(year, 12, 31)
    if through is not None and through < last_day:
        last_day = through

    first_monday = date.fromisoformat(next(iter(weeks)))
    last_monday = max(week_start(last_day), first_monday)

    series: list[WeeklyHours] = []
    monday = first_monday
    while monday <= last_monday:
        week_activities = weeks.get(monday.isoformat(), [])
        training = [a for a in week_activities if is_training(a)]
        raw_hours = sum((a.hours for a in training), 0.0)
        adjusted_hours = calculate_adjusted_hours(training)
        series.append(
            WeeklyHours(
                week_start=monday.isoformat(),
                raw_hours=round_half_up(raw_hours, 2),
                adjusted_hours=round_half_up(adjusted_hours, 2),
                discount_hours=round_half_up(raw_hours - adjusted_hours, 2),
                race_points=calculate_race_points(week_activities),
            )
        )
        monday += timedelta(days=7)
    return series
