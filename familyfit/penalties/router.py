"""API endpoints for penalty validation and tallying."""

from fastapi import APIRouter
from loguru import logger

from familyfit.penalties.schemas import PenaltyCounts, PenaltyEvent
from familyfit.penalties.service import tally_penalties, validate_penalty

router = APIRouter(prefix="/penalties", tags=["penalties"])


@router.post("/validate", response_model=PenaltyEvent)
async def validate(event: PenaltyEvent):
    """Check a single penalty event before it is logged.

    Raises
    ------
    InvalidPenalty
        Mapped to 422 for quantities outside 1..10 or Friday/Saturday dates
    """
    validated = validate_penalty(event)
    logger.info(
        "Penalty accepted",
        penalty_type=validated.penalty_type.value,
        quantity=validated.quantity,
        penalty_date=validated.penalty_date.isoformat(),
    )
    return validated


@router.post("/tally", response_model=PenaltyCounts)
async def tally(events: list[PenaltyEvent]):
    """Sum logged events into the counts the scoring engine takes."""
    return tally_penalties(events)
