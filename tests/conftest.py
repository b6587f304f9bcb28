"""
Pytest fixtures for scoring tests.
"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from familyfit.activities.schemas import Activity, WorkoutType
from familyfit.scoring.schemas import ScoringConfig


def make_activity(
    type="Run",
    hours=1.0,
    start="2025-03-04T08:00:00",
    workout_type=WorkoutType.TRAINING,
    local_start=None,
    **extra,
) -> Activity:
    """Build an Activity with a UTC start and (by default) matching local start."""
    start_date = datetime.fromisoformat(start).replace(tzinfo=timezone.utc)
    start_date_local = (
        datetime.fromisoformat(local_start) if local_start else start_date.replace(tzinfo=None)
    )
    return Activity(
        type=type,
        workout_type=workout_type,
        moving_time_seconds=round(hours * 3600),
        start_date=start_date,
        start_date_local=start_date_local,
        **extra,
    )


@pytest.fixture
def activity():
    """Factory fixture for activities."""
    return make_activity


@pytest.fixture
def config():
    """Factory fixture for scoring configs with neutral defaults."""

    def _config(**overrides) -> ScoringConfig:
        values = {"handicap": 1.0, "weekly_target_hours": 7.0, "selected_year": 2025}
        values.update(overrides)
        return ScoringConfig(**values)

    return _config


@pytest.fixture
def monday():
    """A Monday in 2025 (UTC)."""
    return datetime(2025, 3, 3, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def week_of(monday):
    """Return the ISO timestamp of a given weekday offset from ``monday``."""

    def _at(days: int, hour: int = 8) -> str:
        day = monday + timedelta(days=days)
        return day.replace(hour=hour, tzinfo=None).isoformat()

    return _at


@pytest.fixture
def client():
    """FastAPI test client (runs the app lifespan)."""
    from familyfit.main import app

    with TestClient(app) as test_client:
        yield test_client
