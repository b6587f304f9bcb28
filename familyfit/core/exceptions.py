"""Domain exceptions for scoring and penalty handling."""


class FamilyFitException(Exception):
    """Base exception for family fitness errors."""

    pass


class InvalidScoringInput(FamilyFitException):
    """Raised when a roster cannot be turned into handicaps.

    Covers non-positive weekly targets reaching ``derive_handicaps`` and
    duplicate member names. Field-level checks (non-positive handicap or
    target, negative counts or durations) are pydantic validation errors.
    """

    pass


class InvalidPenalty(FamilyFitException):
    """Raised when a logged penalty event is rejected."""

    pass
