"""
Format policy and result-code catalog.

A match format decides which result codes exist and how many sets a record
carries for each of them. The amateur format plays a super tiebreak instead
of a third set, so its split-set code carries two sets plus the tiebreak.
"""

import re
from dataclasses import dataclass
from typing import List, Union

from courtside.result_core.errors import Rejection, invalid_result_code
from courtside.result_core.structure import MatchFormat, ResultCode, Side


RESULT_CODE_PATTERN = re.compile(r"^\s*(\d)\s*-\s*(\d)(\s+ret)?\s*$", re.IGNORECASE)

# (winner_sets, loser_sets) in catalog order, before mirroring for the away side
WINNER_FIRST_CODES = {
    MatchFormat.STANDARD_BO3: [(2, 0), (2, 1)],
    MatchFormat.AMATEUR_BO3_SUPER_TIEBREAK: [(2, 0), (2, 1)],
    MatchFormat.BO5: [(3, 0), (3, 1), (3, 2)],
}


@dataclass(frozen=True)
class FormatRules:
    """What a (format, result code) pair implies for the record."""

    set_count: int
    is_straight_sets: bool
    third_set_is_super_tiebreak: bool


def is_legal_code(match_format: MatchFormat, code: ResultCode) -> bool:
    """Check whether a result code can occur in the given format."""
    pair = (code.winner_sets, code.loser_sets)
    return code.winning_side is not None and pair in WINNER_FIRST_CODES[match_format]


def third_set_is_super_tiebreak(match_format: MatchFormat, code: ResultCode) -> bool:
    return (
        match_format is MatchFormat.AMATEUR_BO3_SUPER_TIEBREAK
        and code.winner_sets == 2
        and code.loser_sets == 1
    )


def rules_for(
    match_format: MatchFormat, code: ResultCode
) -> Union[FormatRules, Rejection]:
    """Return the FormatRules for a code, or reject a code the format never produces."""
    if not is_legal_code(match_format, code):
        return invalid_result_code(
            f"{code} is not a valid result for a {match_format.value} match"
        )

    super_tiebreak = third_set_is_super_tiebreak(match_format, code)
    set_count = code.total_sets - 1 if super_tiebreak else code.total_sets
    return FormatRules(
        set_count=set_count,
        is_straight_sets=code.loser_sets == 0,
        third_set_is_super_tiebreak=super_tiebreak,
    )


def parse_result_code(text: str) -> Union[ResultCode, Rejection]:
    """Parse "2-1", "0-2" or "1-3 ret" into a ResultCode."""
    match = RESULT_CODE_PATTERN.match(text or "")
    if match is None:
        return invalid_result_code(f"'{text}' is not a result code")
    return ResultCode(
        home_sets=int(match.group(1)),
        away_sets=int(match.group(2)),
        retired=match.group(3) is not None,
    )


def codes_for(
    match_format: MatchFormat, winning_side: Side, include_retirements: bool = False
) -> List[ResultCode]:
    """List the legal result codes for a format when `winning_side` won.

    Away codes are the mirror of the home codes. Retirement variants, when
    requested, follow the regular codes in the same order.
    """
    codes = []
    for winner_sets, loser_sets in WINNER_FIRST_CODES[match_format]:
        code = ResultCode(winner_sets, loser_sets)
        codes.append(code if winning_side is Side.HOME else code.mirrored())

    if include_retirements:
        codes += [ResultCode(c.home_sets, c.away_sets, retired=True) for c in codes]
    return codes


def code_label(match_format: MatchFormat, code: ResultCode) -> str:
    """Operator-facing description of a result code."""
    if code.retired:
        return f"{ResultCode(code.home_sets, code.away_sets)} (Retirement)"
    if code.loser_sets == 0:
        description = "Straight sets"
    elif third_set_is_super_tiebreak(match_format, code):
        description = "Super tiebreak"
    else:
        description = {3: "Three sets", 4: "Four sets", 5: "Five sets"}[code.total_sets]
    return f"{code} ({description})"
