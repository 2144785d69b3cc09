"""
Tiebreak handling for individual sets.

A set that finished 7-6 was decided by a 7-point tiebreak. Its sub-score is
recorded as the raw pair ("7-3" or "3-7", one side always 7), and once the
record is persisted the sub-score takes the place of the set score.
"""

from dataclasses import replace
from typing import List, Optional, Union

from courtside.result_core.errors import Rejection, malformed_score
from courtside.result_core.structure import SetRecord, join_score, split_score


TIEBREAK_SET_SCORES = ("7-6", "6-7")
TIEBREAK_POINTS = 7

# Sentinel some clients send for "no tiebreak"
NO_TIEBREAK = "none"


def is_tiebreak_set(score: Optional[str]) -> bool:
    """True if a set score means the set went to a tiebreak."""
    pair = split_score(score)
    return pair is not None and join_score(*pair) in TIEBREAK_SET_SCORES


def tiebreak_score_options() -> List[str]:
    """All raw sub-scores an operator can pick for a tiebreak set."""
    won = [join_score(TIEBREAK_POINTS, n) for n in range(TIEBREAK_POINTS)]
    lost = [join_score(n, TIEBREAK_POINTS) for n in range(TIEBREAK_POINTS)]
    return won + lost


def normalize_tiebreak_score(value: Optional[str]) -> Optional[str]:
    """Collapse the "none" sentinel and blanks to None."""
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == NO_TIEBREAK:
        return None
    return value


def check_tiebreak_score(tiebreak_score: str) -> Optional[Rejection]:
    """Return a Rejection if the sub-score is not 7 against 0..6."""
    pair = split_score(tiebreak_score)
    if pair is None or join_score(*pair) not in tiebreak_score_options():
        return malformed_score(
            f"'{tiebreak_score}' is not a tiebreak score (expected e.g. 7-3 or 3-7)"
        )
    return None


def tiebreak_loser_points(tiebreak_score: str) -> Union[int, Rejection]:
    """Points scored by the side that lost the tiebreak."""
    problem = check_tiebreak_score(tiebreak_score)
    if problem is not None:
        return problem
    return min(split_score(tiebreak_score))


def clear_tiebreak(set_record: SetRecord) -> SetRecord:
    return replace(set_record, tiebreak_score=None)


def resolve_for_persistence(set_record: SetRecord) -> SetRecord:
    """Emit a set with exactly one score representation.

    A recorded tiebreak sub-score replaces the set score; otherwise the set
    score is kept as-is.
    """
    tiebreak_score = normalize_tiebreak_score(set_record.tiebreak_score)
    if tiebreak_score is not None:
        return replace(set_record, score=None, tiebreak_score=tiebreak_score)
    return replace(set_record, tiebreak_score=None)


def restore_tiebreak_set_score(set_record: SetRecord) -> SetRecord:
    """Undo resolve_for_persistence when a persisted set is loaded for editing."""
    if set_record.tiebreak_score and not set_record.score:
        return replace(set_record, score=TIEBREAK_SET_SCORES[0])
    return set_record
