"""Pure functions for scoring calculations.

No I/O and no shared state - every function here derives its result from its
arguments only, so the same activities always produce the same numbers no
matter which view asks for them.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from familyfit.activities.schemas import Activity, WorkoutType
from familyfit.scoring.schemas import ScoreResult, ScoringConfig, WeeklyScore

POINTS_PER_HOUR = 1.0
REDUCED_POINTS_PER_HOUR = 0.5  # golf, alpine ski, backcountry ski
BONUS_THRESHOLD_FACTOR = 1.25  # bonus starts 25% above the weekly target
BONUS_PREMIUM = 0.25  # hours past the threshold count 1.25x
RACE_POINTS = 10
GOLF_TOURNAMENT_POINTS = 5
POPTART_PENALTY = -0.5  # per poptart (includes a small bag of chips)
WINE_PENALTY = -0.25  # per glass

REDUCED_RATE_SPORTS = frozenset({"golf", "alpineski", "backcountryski"})
TRIATHLON_SPORTS = frozenset({"run", "ride"})


def round_half_up(value: float, places: int) -> float:
    """Round to ``places`` decimals, ties away from zero.

    Parameters
    ----------
    value : float
        Value to round
    places : int
        Number of decimal places

    Returns
    -------
    float
        Rounded value

    Notes
    -----
    Works on the exact binary value of ``value``, so 0.25 rounds to 0.3 and
    -1.25 to -1.3 (the builtin ``round`` gives 0.2 and -1.2), while 0.35,
    stored just below 0.35, rounds to 0.3.
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
    # Avoid leaking -0.0 into results
    return rounded + 0.0


def week_start(instant: datetime | date) -> date:
    """Get the Monday of the week containing the given day.

    Parameters
    ----------
    instant : datetime | date
        Any instant or date within the week

    Returns
    -------
    date
        Monday of that week
    """
    day = instant.date() if isinstance(instant, datetime) else instant
    return day - timedelta(days=day.weekday())


def week_key(instant: datetime | date) -> str:
    """Week bucket key (Monday as YYYY-MM-DD)."""
    return week_start(instant).strftime("%Y-%m-%d")


def bucket_by_week(
    activities: Iterable[Activity], year: int
) -> dict[str, list[Activity]]:
    """Group one year's activities into Monday-start weeks.

    Parameters
    ----------
    activities : Iterable[Activity]
        Activities in any order, any workout type
    year : int
        Calendar year to keep, judged on the UTC ``start_date``

    Returns
    -------
    dict[str, list[Activity]]
        Week key (Monday, YYYY-MM-DD) to that week's activities, with keys in
        ascending order

    Notes
    -----
    Both the year filter and the week key use the UTC calendar day of
    ``start_date``. A week that straddles New Year therefore only holds the
    activities from the selected year.
    """
    weeks: dict[str, list[Activity]] = defaultdict(list)
    for activity in activities:
        if activity.start_date.year != year:
            continue
        weeks[week_key(activity.start_date)].append(activity)

    return {key: weeks[key] for key in sorted(weeks)}


def rate_multiplier(activity_type: str) -> float:
    """Points per hour for a sport (0.5 for golf and skiing, 1.0 otherwise)."""
    if activity_type.lower() in REDUCED_RATE_SPORTS:
        return REDUCED_POINTS_PER_HOUR
    return POINTS_PER_HOUR


def is_training(activity: Activity) -> bool:
    return activity.workout_type is WorkoutType.TRAINING


def calculate_adjusted_hours(activities: Iterable[Activity]) -> float:
    """Sum rate-adjusted hours of the training activities.

    The result is both the training points before handicap and the hours
    compared against the bonus threshold.
    """
    return sum(
        (a.hours * rate_multiplier(a.type) for a in activities if is_training(a)),
        0.0,
    )


def calculate_bonus_points(adjusted_hours: float, weekly_target_hours: float) -> float:
    """Get bonus points for hours above 125% of the weekly target.

    Parameters
    ----------
    adjusted_hours : float
        Rate-adjusted training hours for the week
    weekly_target_hours : float
        Member's weekly target

    Returns
    -------
    float
        ``(adjusted_hours - threshold) * 0.25`` above the threshold, else 0

    Examples
    --------
    Target 10h puts the threshold at 12.5h; 14 adjusted hours earn
    (14 - 12.5) * 0.25 = 0.375 bonus points.
    """
    threshold = weekly_target_hours * BONUS_THRESHOLD_FACTOR
    if adjusted_hours > threshold:
        return (adjusted_hours - threshold) * BONUS_PREMIUM
    return 0.0


def calculate_race_points(activities: Iterable[Activity]) -> int:
    """Calculate race points with same-day triathlon merging.

    Parameters
    ----------
    activities : Iterable[Activity]
        Activities of one week; only races are counted

    Returns
    -------
    int
        Race points (not handicap-adjusted)

    Notes
    -----
    Races are grouped by the calendar day of ``start_date_local``. A day with
    both a run and a ride race is one triathlon worth 10 points, including
    any swim or other race logged that day. Any other day scores 10 points
    per race.
    """
    races_by_day: dict[date, list[Activity]] = defaultdict(list)
    for activity in activities:
        if activity.workout_type is WorkoutType.RACE:
            races_by_day[activity.start_date_local.date()].append(activity)

    points = 0
    for day_races in races_by_day.values():
        sports = {race.sport for race in day_races}
        if TRIATHLON_SPORTS <= sports:
            points += RACE_POINTS
        else:
            points += len(day_races) * RACE_POINTS
    return points


def calculate_golf_tournament_points(activities: Iterable[Activity]) -> int:
    """5 points per golf tournament (not handicap-adjusted)."""
    return GOLF_TOURNAMENT_POINTS * sum(
        1 for a in activities if a.workout_type is WorkoutType.GOLF_TOURNAMENT
    )


def calculate_week_score(
    week: str,
    activities: Sequence[Activity],
    handicap: float,
    weekly_target_hours: float,
) -> WeeklyScore:
    """Score one week of activities.

    Parameters
    ----------
    week : str
        Week key (Monday, YYYY-MM-DD)
    activities : Sequence[Activity]
        All activities of the week
    handicap : float
        Multiplier for training and bonus points
    weekly_target_hours : float
        Member's weekly target

    Returns
    -------
    WeeklyScore
        Training points rounded to 1 decimal, bonus to 2, total to 1

    Notes
    -----
    Handicap is applied to training and bonus points separately, each from
    the unrounded adjusted hours. The total is summed from the displayed
    (rounded) components and rounded to one decimal, so a week's total never
    drifts more than 0.05 from the sum of its parts.
    """
    adjusted_hours = calculate_adjusted_hours(activities)
    bonus_points = calculate_bonus_points(adjusted_hours, weekly_target_hours)
    race_points = calculate_race_points(activities)
    golf_tournament_points = calculate_golf_tournament_points(activities)

    training_points = round_half_up(adjusted_hours * handicap, 1)
    bonus_points = round_half_up(bonus_points * handicap, 2)
    total_points = training_points + bonus_points + race_points + golf_tournament_points

    return WeeklyScore(
        week_start=week,
        training_points=training_points,
        bonus_points=bonus_points,
        race_points=race_points,
        golf_tournament_points=golf_tournament_points,
        total_points=round_half_up(total_points, 1),
    )


def calculate_penalties(poptart_count: int, wine_glasses: int) -> tuple[float, float]:
    """Get the (poptart, wine) deductions for the whole season."""
    poptart_penalty = poptart_count * POPTART_PENALTY if poptart_count else 0.0
    wine_penalty = wine_glasses * WINE_PENALTY if wine_glasses else 0.0
    return poptart_penalty, wine_penalty


def calculate_scores(
    activities: Iterable[Activity], config: ScoringConfig
) -> ScoreResult:
    """Calculate a member's weekly breakdown and season total.

    Parameters
    ----------
    activities : Iterable[Activity]
        The member's full activity history, any order
    config : ScoringConfig
        Handicap, weekly target, selected year and penalty counts

    Returns
    -------
    ScoreResult
        Weekly scores ascending by week start, penalties, and
        ``total_score = round(sum(week totals) + penalties, 1)``

    Notes
    -----
    Penalties are never attributed to a week; they are deducted once from
    the season total.
    """
    weekly_scores = [
        calculate_week_score(
            week, week_activities, config.handicap, config.weekly_target_hours
        )
        for week, week_activities in bucket_by_week(
            activities, config.selected_year
        ).items()
    ]

    poptart_penalty, wine_penalty = calculate_penalties(
        config.poptart_count, config.wine_glasses
    )

    weekly_total = sum((w.total_points for w in weekly_scores), 0.0)
    total_score = round_half_up(weekly_total + poptart_penalty + wine_penalty, 1)

    return ScoreResult(
        weekly_scores=weekly_scores,
        total_score=total_score,
        poptart_penalty=poptart_penalty,
        wine_penalty=wine_penalty,
    )
