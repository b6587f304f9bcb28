"""Service layer tying handicaps, penalties and the calculator together."""

from collections import Counter
from collections.abc import Sequence

from loguru import logger

from familyfit.core.exceptions import InvalidScoringInput
from familyfit.penalties.service import tally_penalties
from familyfit.scoring.calculator import calculate_scores, round_half_up
from familyfit.scoring.handicap import derive_handicaps
from familyfit.scoring.schemas import MemberScore, RosterMember, ScoringConfig
from familyfit.scoring.summary import cumulative_points


class ScoringService:
    """Service for scoring family members and ranking the roster."""

    def roster_handicaps(self, members: Sequence[RosterMember]) -> dict[str, float]:
        """Derive handicaps for every member from the roster's targets.

        Parameters
        ----------
        members : Sequence[RosterMember]
            Full roster

        Returns
        -------
        dict[str, float]
            Member name to derived handicap

        Raises
        ------
        InvalidScoringInput
            If two members share a name
        """
        names = Counter(m.name for m in members)
        duplicates = sorted(name for name, count in names.items() if count > 1)
        if duplicates:
            raise InvalidScoringInput(
                f"Member names must be unique, duplicated: {', '.join(duplicates)}"
            )

        handicaps = derive_handicaps({m.name: m.weekly_target_hours for m in members})
        logger.debug("Derived handicaps", members=len(handicaps))
        return handicaps

    def score_member(
        self, member: RosterMember, handicap: float, selected_year: int
    ) -> MemberScore:
        """Score a single member for one year.

        Parameters
        ----------
        member : RosterMember
            Member with activities and logged penalties
        handicap : float
            Handicap to apply (explicit or derived)
        selected_year : int
            Calendar year to score

        Returns
        -------
        MemberScore
            Season breakdown with per-category sums and cumulative series

        Raises
        ------
        InvalidPenalty
            If any logged penalty breaks the logging rules
        """
        counts = tally_penalties(member.penalties)
        config = ScoringConfig(
            handicap=handicap,
            weekly_target_hours=member.weekly_target_hours,
            selected_year=selected_year,
            poptart_count=counts.poptart_count,
            wine_glasses=counts.wine_glasses,
        )
        result = calculate_scores(member.activities, config)
        weeks = result.weekly_scores

        logger.info(
            "Scored member",
            member=member.name,
            year=selected_year,
            weeks=len(weeks),
            total_score=result.total_score,
        )

        return MemberScore(
            name=member.name,
            handicap=handicap,
            weekly_target_hours=member.weekly_target_hours,
            training_points=round_half_up(
                sum((w.training_points for w in weeks), 0.0), 1
            ),
            bonus_points=round_half_up(sum((w.bonus_points for w in weeks), 0.0), 2),
            race_points=sum(w.race_points for w in weeks),
            golf_tournament_points=sum(w.golf_tournament_points for w in weeks),
            result=result,
            cumulative=cumulative_points(weeks),
        )

    def leaderboard(
        self, members: Sequence[RosterMember], selected_year: int
    ) -> list[MemberScore]:
        """Score the whole roster and rank it.

        Members without an explicit handicap get the one derived from the
        roster's weekly targets.

        Returns
        -------
        list[MemberScore]
            Sorted by total score (descending), ties by name
        """
        derived = self.roster_handicaps(members)

        scores = [
            self.score_member(
                member,
                member.handicap if member.handicap is not None else derived[member.name],
                selected_year,
            )
            for member in members
        ]

        scores.sort(key=lambda s: (-s.result.total_score, s.name))
        return scores


# Singleton instance
scoring_service = ScoringService()
