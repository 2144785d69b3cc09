"""
Score line rendering for persisted match results.

Set scores are stored set-winner first; the score line always lists the
match winner's games first, so a set the match winner lost is reversed.
Tiebreak sets are written in tennis notation, e.g. "7-6(3)".
"""

from typing import List

from courtside.result_core.errors import Rejection
from courtside.result_core.structure import MatchResultRecord, join_score, split_score
from courtside.result_core.tiebreaks import tiebreak_loser_points


def _reoriented(score: str, set_won_by_match_winner: bool) -> str:
    pair = split_score(score)
    if pair is None:
        return score
    first, second = pair
    if set_won_by_match_winner:
        return join_score(first, second)
    return join_score(second, first)


def _tiebreak_notation(tiebreak_score: str, set_won_by_match_winner: bool) -> str:
    loser_points = tiebreak_loser_points(tiebreak_score)
    if isinstance(loser_points, Rejection):
        return tiebreak_score
    games = "7-6" if set_won_by_match_winner else "6-7"
    return f"{games}({loser_points})"


def format_score_line(record: MatchResultRecord) -> List[str]:
    """Render every set (and the super tiebreak, last) match-winner first."""
    scores = []
    for set_record in record.sets:
        set_won_by_match_winner = (
            set_record.winner is None
            or record.winner is None
            or set_record.winner is record.winner
        )
        if set_record.tiebreak_score:
            scores.append(
                _tiebreak_notation(set_record.tiebreak_score, set_won_by_match_winner)
            )
        elif set_record.score:
            scores.append(_reoriented(set_record.score, set_won_by_match_winner))

    if record.super_tiebreak is not None and record.super_tiebreak.score:
        scores.append(record.super_tiebreak.score)
    return scores


def format_score_summary(record: MatchResultRecord) -> str:
    """The score line as a single string, e.g. "6-4 3-6 10-8"."""
    return " ".join(format_score_line(record))
