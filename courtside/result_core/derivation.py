"""
Derivation of per-set winners and suggested set scores from a result code.
"""

from typing import List, Optional, Sequence, Union

from courtside.result_core.errors import Rejection, invalid_result_code
from courtside.result_core.formats import rules_for
from courtside.result_core.structure import MatchFormat, ResultCode, Side


DEFAULT_SET_SCORE = "6-4"


def derive_set_winners(
    match_format: MatchFormat, winning_side: Side, code: ResultCode
) -> Union[List[Optional[Side]], Rejection]:
    """Derive the initial winner of every set the code implies.

    Straight sets are assigned to the match winner. Split-set results are
    left unset: the operator decides which sets the loser took.
    """
    rules = rules_for(match_format, code)
    if isinstance(rules, Rejection):
        return rules
    if code.winning_side is not winning_side:
        return invalid_result_code(
            f"{code} is not a win for the {winning_side.value} side"
        )

    if rules.is_straight_sets:
        return [winning_side] * rules.set_count
    return [None] * rules.set_count


def suggest_set_score(
    set_winner: Optional[Side], default_score: str = DEFAULT_SET_SCORE
) -> Optional[str]:
    """Suggest a score for one set; nothing until its winner is known."""
    if set_winner is None:
        return None
    # Stored set-winner games first, so the suggestion is the same either way
    return default_score


def suggest_set_scores(
    set_winners: Sequence[Optional[Side]],
    match_format: MatchFormat,
    code: ResultCode,
    default_score: str = DEFAULT_SET_SCORE,
) -> Union[List[Optional[str]], Rejection]:
    """Propose a score for every set in `set_winners`.

    A third set replaced by a super tiebreak gets no entry at all, and
    retirements get no suggestions since the last set was not finished.
    """
    rules = rules_for(match_format, code)
    if isinstance(rules, Rejection):
        return rules

    suggestions = []
    for index, set_winner in enumerate(set_winners, start=1):
        if rules.third_set_is_super_tiebreak and index == 3:
            continue
        if code.retired:
            suggestions.append(None)
        else:
            suggestions.append(suggest_set_score(set_winner, default_score))
    return suggestions
