"""Handicap derivation across a family roster."""

from collections.abc import Mapping

from familyfit.core.exceptions import InvalidScoringInput


def derive_handicaps(targets: Mapping[str, float]) -> dict[str, float]:
    """Normalize members' scores against the lowest weekly target.

    Parameters
    ----------
    targets : Mapping[str, float]
        Member name to weekly target hours

    Returns
    -------
    dict[str, float]
        Member name to handicap (``min_target / own_target``). Members with
        the lowest target get exactly 1.0. An empty roster yields ``{}``.

    Raises
    ------
    InvalidScoringInput
        If any target is not positive

    Notes
    -----
    Recompute whenever the roster or any target changes; the scoring engine
    itself only ever sees a member's own handicap.
    """
    for name, target in targets.items():
        if not target > 0:
            raise InvalidScoringInput(
                f"Weekly target for {name} must be positive, got {target}"
            )

    if not targets:
        return {}

    min_target = min(targets.values())
    return {name: min_target / target for name, target in targets.items()}
