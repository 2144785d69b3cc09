"""
Super tiebreak handling for the amateur best-of-3 format.

When an amateur match is split one set all, a 10-point match tiebreak is
played instead of a third set. It always decides the match, so its winner is
never chosen independently: it follows the match winner.
"""

from dataclasses import replace
from typing import Optional

from courtside.result_core.errors import Rejection, malformed_score
from courtside.result_core.formats import is_legal_code, third_set_is_super_tiebreak
from courtside.result_core.structure import (
    MatchFormat,
    MatchResultRecord,
    ResultCode,
    SuperTiebreak,
    join_score,
    split_score,
)


SUPER_TIEBREAK_POINTS = 10
SUPER_TIEBREAK_MARGIN = 2


def is_applicable(match_format: MatchFormat, code: Optional[ResultCode]) -> bool:
    """True if the record must carry a super tiebreak instead of a third set."""
    if code is None or not is_legal_code(match_format, code):
        return False
    return third_set_is_super_tiebreak(match_format, code)


def normalize_super_tiebreak_score(score: str) -> str:
    """Put the match winner's points first.

    The super tiebreak always goes to the match winner, so a score typed
    loser first ("8-10") can only mean "10-8". Unreadable input is returned
    stripped for check_super_tiebreak_score to reject.
    """
    pair = split_score(score)
    if pair is None:
        return score.strip()
    return join_score(max(pair), min(pair))


def check_super_tiebreak_score(score: str) -> Optional[Rejection]:
    """Accept an "S-S" pair of non-negative integers, winner's points first.

    The first-to-10, win-by-2 rule is not enforced: see
    super_tiebreak_warning.
    """
    pair = split_score(score)
    if pair is None:
        return malformed_score(f"'{score}' is not a super tiebreak score (e.g. 10-8)")
    if pair[0] <= pair[1]:
        return malformed_score(
            f"'{score}' must list the match winner's points first (e.g. 10-8)"
        )
    return None


def super_tiebreak_warning(score: Optional[str]) -> Optional[str]:
    """Describe why a score is not a regulation super tiebreak, if it isn't.

    Advisory only; such scores are still stored.
    """
    pair = split_score(score)
    if pair is None:
        return None
    winner_points, loser_points = max(pair), min(pair)
    if winner_points < SUPER_TIEBREAK_POINTS:
        return f"{score}: the winner usually needs at least {SUPER_TIEBREAK_POINTS} points"
    if winner_points - loser_points < SUPER_TIEBREAK_MARGIN:
        return f"{score}: a super tiebreak is usually won by {SUPER_TIEBREAK_MARGIN} points"
    return None


def sync_super_tiebreak(record: MatchResultRecord) -> MatchResultRecord:
    """Bring the super tiebreak in line with the record's format, code and winner.

    Creates an empty super tiebreak when one is needed, discards it when it is
    not, and forces its winner to the match winner.
    """
    if not is_applicable(record.format, record.result_code):
        if record.super_tiebreak is None:
            return record
        return replace(record, super_tiebreak=None)

    super_tiebreak = record.super_tiebreak or SuperTiebreak()
    if super_tiebreak.winner is not record.winner:
        super_tiebreak = replace(super_tiebreak, winner=record.winner)
    return replace(record, super_tiebreak=super_tiebreak)
