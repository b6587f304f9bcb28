"""
Unit tests for penalty validation and tallying.
"""
from datetime import date

import pytest

from familyfit.core.exceptions import InvalidPenalty
from familyfit.penalties.schemas import PenaltyEvent, PenaltyType
from familyfit.penalties.service import tally_penalties, validate_penalty

# Week of 2025-03-02 (Sunday) .. 2025-03-08 (Saturday)
SUNDAY = date(2025, 3, 2)
THURSDAY = date(2025, 3, 6)
FRIDAY = date(2025, 3, 7)
SATURDAY = date(2025, 3, 8)


def event(penalty_type="poptart", quantity=1, penalty_date=SUNDAY) -> PenaltyEvent:
    return PenaltyEvent(
        penalty_type=penalty_type, quantity=quantity, penalty_date=penalty_date
    )


class TestValidatePenalty:
    """Test the logging rules."""

    @pytest.mark.parametrize("day", [2, 3, 4, 5, 6])
    def test_sunday_through_thursday_accepted(self, day):
        assert validate_penalty(event(penalty_date=date(2025, 3, day)))

    @pytest.mark.parametrize("day", [FRIDAY, SATURDAY])
    def test_weekend_treats_rejected(self, day):
        with pytest.raises(InvalidPenalty, match="Balance is key"):
            validate_penalty(event(penalty_date=day))

    @pytest.mark.parametrize("quantity", [1, 10])
    def test_quantity_bounds_accepted(self, quantity):
        assert validate_penalty(event(quantity=quantity)).quantity == quantity

    @pytest.mark.parametrize("quantity", [0, 11, -2])
    def test_quantity_out_of_range(self, quantity):
        with pytest.raises(InvalidPenalty, match="between 1 and 10"):
            validate_penalty(event(quantity=quantity))

    def test_default_quantity_is_one(self):
        assert PenaltyEvent(penalty_type="wine", penalty_date=THURSDAY).quantity == 1


class TestTallyPenalties:
    def test_sums_per_type(self):
        counts = tally_penalties(
            [
                event("poptart", 2),
                event("wine", 3, THURSDAY),
                event(PenaltyType.POPTART, 1, THURSDAY),
            ]
        )
        assert counts.poptart_count == 3
        assert counts.wine_glasses == 3

    def test_empty(self):
        counts = tally_penalties([])
        assert (counts.poptart_count, counts.wine_glasses) == (0, 0)

    def test_invalid_event_rejects_tally(self):
        with pytest.raises(InvalidPenalty):
            tally_penalties([event(), event(penalty_date=FRIDAY)])
