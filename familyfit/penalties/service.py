"""Validation and tallying of penalty events."""

from collections.abc import Iterable

from loguru import logger

from familyfit.core.exceptions import InvalidPenalty
from familyfit.penalties.schemas import PenaltyCounts, PenaltyEvent, PenaltyType

MIN_QUANTITY = 1
MAX_QUANTITY = 10

# date.weekday(): Monday=0 ... Sunday=6. Friday and Saturday are treat days.
TREAT_DAYS = frozenset({4, 5})


def validate_penalty(event: PenaltyEvent) -> PenaltyEvent:
    """Check a penalty event against the logging rules.

    Parameters
    ----------
    event : PenaltyEvent
        Event to validate

    Returns
    -------
    PenaltyEvent
        The same event, unchanged

    Raises
    ------
    InvalidPenalty
        If the quantity is outside 1..10 or the date is a Friday or Saturday
    """
    if not MIN_QUANTITY <= event.quantity <= MAX_QUANTITY:
        raise InvalidPenalty(
            f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}"
        )

    if event.penalty_date.weekday() in TREAT_DAYS:
        raise InvalidPenalty("Balance is key -- enjoy your treat!")

    return event


def tally_penalties(events: Iterable[PenaltyEvent]) -> PenaltyCounts:
    """Sum validated penalty quantities per type.

    Every event is validated first; one bad event rejects the whole tally.
    """
    poptarts = 0
    wine = 0
    count = 0

    for event in events:
        validate_penalty(event)
        count += 1
        if event.penalty_type is PenaltyType.POPTART:
            poptarts += event.quantity
        else:
            wine += event.quantity

    logger.debug(
        "Tallied penalties", events=count, poptart_count=poptarts, wine_glasses=wine
    )
    return PenaltyCounts(poptart_count=poptarts, wine_glasses=wine)
