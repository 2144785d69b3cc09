"""
Projection of side-based records onto participant identities.

Singles results are stored with player ids, doubles results with team
labels. This module is the single place where a Side becomes one of those,
and it always fills exactly one representation and nulls the other.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from courtside.result_core.errors import Rejection, wrong_participant_mode
from courtside.result_core.structure import (
    MatchResultRecord,
    ParticipantMode,
    Participants,
    ResultCode,
    Side,
)


class IdentityTarget(Enum):
    """Which winner of a projected result is being read."""

    MATCH_WINNER = "match_winner"
    SET_WINNER = "set_winner"
    SUPER_TIEBREAK_WINNER = "super_tiebreak_winner"


@dataclass(frozen=True)
class ProjectedSet:
    winner_id: Optional[str] = None
    winner_team: Optional[str] = None
    score: Optional[str] = None
    tiebreak_score: Optional[str] = None


@dataclass(frozen=True)
class ProjectedResult:
    """A result with every winner resolved to a player id or a team label."""

    mode: ParticipantMode
    result_code: Optional[ResultCode] = None
    winner_id: Optional[str] = None
    winner_team: Optional[str] = None
    sets: Tuple[ProjectedSet, ...] = field(default_factory=tuple)
    super_tiebreak_score: Optional[str] = None
    super_tiebreak_winner_id: Optional[str] = None
    super_tiebreak_winner_team: Optional[str] = None

    def identity(
        self,
        representation: ParticipantMode,
        target: IdentityTarget,
        set_number: Optional[int] = None,
    ) -> Union[Optional[str], Rejection]:
        """Read a winner in the given representation.

        Reading team labels from a singles result (or ids from a doubles
        result) is a contract violation and is rejected.
        """
        if representation is not self.mode:
            return wrong_participant_mode(
                f"cannot read {representation.value} identities from a "
                f"{self.mode.value} result"
            )

        use_ids = representation is ParticipantMode.SINGLES
        if target is IdentityTarget.MATCH_WINNER:
            return self.winner_id if use_ids else self.winner_team
        if target is IdentityTarget.SUPER_TIEBREAK_WINNER:
            if use_ids:
                return self.super_tiebreak_winner_id
            return self.super_tiebreak_winner_team

        if set_number is None or not 1 <= set_number <= len(self.sets):
            return None
        projected_set = self.sets[set_number - 1]
        return projected_set.winner_id if use_ids else projected_set.winner_team


def _resolve(
    participants: Participants, side: Optional[Side]
) -> Tuple[Optional[str], Optional[str]]:
    """Return (id, team) for a side; the inactive one is always None."""
    if side is None:
        return (None, None)
    identity = participants.identity_for(side)
    if participants.mode is ParticipantMode.SINGLES:
        return (identity, None)
    return (None, identity)


def project(record: MatchResultRecord) -> ProjectedResult:
    """Resolve all winners of a record into its participant representation."""
    participants = record.participants
    winner_id, winner_team = _resolve(participants, record.winner)

    sets = []
    for set_record in record.sets:
        set_winner_id, set_winner_team = _resolve(participants, set_record.winner)
        sets.append(
            ProjectedSet(
                winner_id=set_winner_id,
                winner_team=set_winner_team,
                score=set_record.score,
                tiebreak_score=set_record.tiebreak_score,
            )
        )

    super_tiebreak = record.super_tiebreak
    st_winner_id, st_winner_team = _resolve(
        participants, super_tiebreak.winner if super_tiebreak else None
    )
    return ProjectedResult(
        mode=participants.mode,
        result_code=record.result_code,
        winner_id=winner_id,
        winner_team=winner_team,
        sets=tuple(sets),
        super_tiebreak_score=super_tiebreak.score if super_tiebreak else None,
        super_tiebreak_winner_id=st_winner_id,
        super_tiebreak_winner_team=st_winner_team,
    )


def representation_conflict(projected: ProjectedResult) -> Optional[Rejection]:
    """Return a Rejection if any field of the inactive representation is set."""
    if projected.mode is ParticipantMode.SINGLES:
        inactive = [projected.winner_team, projected.super_tiebreak_winner_team]
        inactive += [s.winner_team for s in projected.sets]
    else:
        inactive = [projected.winner_id, projected.super_tiebreak_winner_id]
        inactive += [s.winner_id for s in projected.sets]

    if any(value is not None for value in inactive):
        return wrong_participant_mode(
            f"{projected.mode.value} result carries identities of the other mode"
        )
    return None


def side_for_identity(
    participants: Participants, identity: Optional[str]
) -> Union[Optional[Side], Rejection]:
    """Map a stored player id or team label back to a Side."""
    if not identity:
        return None
    for side in Side:
        if participants.identity_for(side) == identity:
            return side
    return wrong_participant_mode(
        f"'{identity}' does not identify a side of this "
        f"{participants.mode.value} match"
    )
