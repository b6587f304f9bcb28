"""Pydantic schemas for penalty events."""

from datetime import date
from enum import Enum

from pydantic import BaseModel


class PenaltyType(str, Enum):
    POPTART = "poptart"  # includes a small bag of chips
    WINE = "wine"  # per glass


class PenaltyEvent(BaseModel):
    """A manually logged treat.

    Range and weekday rules are enforced by ``validate_penalty`` so callers
    get the domain error message rather than a schema error.
    """

    penalty_type: PenaltyType
    quantity: int = 1
    penalty_date: date


class PenaltyCounts(BaseModel):
    """Penalty totals in the shape the scoring engine consumes."""

    poptart_count: int = 0
    wine_glasses: int = 0
