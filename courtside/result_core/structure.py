"""
Core data model for tennis match results.

This module provides an immutable, database-free representation of a match
result as an operator enters it:
- Match formats and sides (home/away)
- Result codes ("2-0", "1-2", "3-2 ret")
- Per-set records and the optional amateur super tiebreak
- Singles/doubles participants as two mutually exclusive shapes
"""

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union


MAX_SETS = 5

SCORE_PATTERN = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


class MatchFormat(Enum):
    """Supported match formats."""

    STANDARD_BO3 = "standard-bo3"
    AMATEUR_BO3_SUPER_TIEBREAK = "amateur-bo3-super-tiebreak"
    BO5 = "bo5"


class Side(Enum):
    """One side of a match: player A/B in singles, team A/B in doubles."""

    HOME = "home"
    AWAY = "away"

    @property
    def opponent(self) -> "Side":
        return Side.AWAY if self is Side.HOME else Side.HOME


class ParticipantMode(Enum):
    SINGLES = "singles"
    DOUBLES = "doubles"


@dataclass(frozen=True)
class ResultCode:
    """Sets won by each side, rendered home-first ("2-1", "1-2", "0-3 ret")."""

    home_sets: int
    away_sets: int
    retired: bool = False

    @property
    def winning_side(self) -> Optional[Side]:
        if self.home_sets > self.away_sets:
            return Side.HOME
        elif self.away_sets > self.home_sets:
            return Side.AWAY
        return None

    @property
    def winner_sets(self) -> int:
        return max(self.home_sets, self.away_sets)

    @property
    def loser_sets(self) -> int:
        return min(self.home_sets, self.away_sets)

    @property
    def total_sets(self) -> int:
        return self.home_sets + self.away_sets

    def sets_for(self, side: Side) -> int:
        return self.home_sets if side is Side.HOME else self.away_sets

    def mirrored(self) -> "ResultCode":
        """The same scoreline won by the other side."""
        return ResultCode(self.away_sets, self.home_sets, self.retired)

    def __str__(self) -> str:
        text = f"{self.home_sets}-{self.away_sets}"
        return f"{text} ret" if self.retired else text


@dataclass(frozen=True)
class SetRecord:
    """One set of a match.

    `score` is stored set-winner games first. While the record is being
    edited a tiebreak set carries both `score` ("7-6") and `tiebreak_score`;
    once resolved for persistence only one of them remains.
    """

    winner: Optional[Side] = None
    score: Optional[str] = None
    tiebreak_score: Optional[str] = None


@dataclass(frozen=True)
class SuperTiebreak:
    """The deciding match tiebreak that replaces the third set (amateur format)."""

    score: Optional[str] = None
    winner: Optional[Side] = None


@dataclass(frozen=True)
class SinglesParticipants:
    """Singles: each side is identified by a player id."""

    home_id: str
    away_id: str

    @property
    def mode(self) -> ParticipantMode:
        return ParticipantMode.SINGLES

    def identity_for(self, side: Side) -> str:
        return self.home_id if side is Side.HOME else self.away_id


@dataclass(frozen=True)
class DoublesParticipants:
    """Doubles: each side is identified by a team label."""

    home_team: str = "team_a"
    away_team: str = "team_b"

    @property
    def mode(self) -> ParticipantMode:
        return ParticipantMode.DOUBLES

    def identity_for(self, side: Side) -> str:
        return self.home_team if side is Side.HOME else self.away_team


Participants = Union[SinglesParticipants, DoublesParticipants]


@dataclass(frozen=True)
class MatchResultRecord:
    """A match result in the shape the engine derives, validates and displays."""

    format: MatchFormat
    participants: Participants
    winner: Optional[Side] = None
    result_code: Optional[ResultCode] = None
    sets: Tuple[SetRecord, ...] = field(default_factory=tuple)
    super_tiebreak: Optional[SuperTiebreak] = None

    @property
    def participant_mode(self) -> ParticipantMode:
        return self.participants.mode

    def set_record(self, set_number: int) -> Optional[SetRecord]:
        """Return the record for a 1-based set number, or None if not carried."""
        if 1 <= set_number <= len(self.sets):
            return self.sets[set_number - 1]
        return None

    def with_set(self, set_number: int, set_record: SetRecord) -> "MatchResultRecord":
        """Return a new record with one set replaced (immutable pattern)."""
        sets = list(self.sets)
        sets[set_number - 1] = set_record
        return replace(self, sets=tuple(sets))


def split_score(score: Optional[str]) -> Optional[Tuple[int, int]]:
    """Parse a "X-Y" score into a pair of ints, or None if it is not one."""
    if not score:
        return None
    match = SCORE_PATTERN.match(score)
    if match is None:
        return None
    return (int(match.group(1)), int(match.group(2)))


def join_score(first: int, second: int) -> str:
    return f"{first}-{second}"
