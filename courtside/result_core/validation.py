"""
Validation of match results before submission.

The validator checks a record that has been resolved for persistence and
reports the first problem it finds. It never raises for domain problems.
"""

from dataclasses import dataclass
from typing import Optional

from courtside.result_core.errors import (
    Rejection,
    conflicting_scores,
    incomplete_record,
    invalid_result_code,
    malformed_score,
    super_tiebreak_mismatch,
)
from courtside.result_core.formats import rules_for
from courtside.result_core.participants import project, representation_conflict
from courtside.result_core.structure import MatchResultRecord, Side, split_score
from courtside.result_core.super_tiebreak import check_super_tiebreak_score, is_applicable
from courtside.result_core.tiebreaks import check_tiebreak_score


MAX_SET_GAMES = 7


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate(): truthy when the record can be submitted."""

    rejection: Optional[Rejection] = None

    @property
    def ok(self) -> bool:
        return self.rejection is None

    def __bool__(self) -> bool:
        return self.ok


def check_set_score(score: str) -> Optional[Rejection]:
    """Return a Rejection unless the score is a "G-G" pair of 0..7 games.

    Set scores are stored set-winner first, so the first number must be the
    larger one.
    """
    pair = split_score(score)
    if (
        pair is None
        or max(pair) > MAX_SET_GAMES
        or pair == (MAX_SET_GAMES, MAX_SET_GAMES)
    ):
        return malformed_score(f"'{score}' is not a set score (e.g. 6-4 or 7-6)")
    if pair[0] <= pair[1]:
        return malformed_score(
            f"'{score}' must list the set winner's games first (e.g. 6-4, not 4-6)"
        )
    return None


def _first_problem(record: MatchResultRecord) -> Optional[Rejection]:
    if record.winner is None:
        return incomplete_record("no match winner selected")
    code = record.result_code
    if code is None:
        return incomplete_record("no match result selected")

    rules = rules_for(record.format, code)
    if isinstance(rules, Rejection):
        return rules
    if code.winning_side is not record.winner:
        return invalid_result_code(
            f"{code} does not match a win for the {record.winner.value} side"
        )

    if len(record.sets) != rules.set_count:
        if rules.third_set_is_super_tiebreak and len(record.sets) > rules.set_count:
            return super_tiebreak_mismatch(
                "the third set is played as a super tiebreak and must not be recorded"
            )
        return incomplete_record(
            f"{code} needs {rules.set_count} sets, got {len(record.sets)}"
        )

    super_tiebreak = record.super_tiebreak
    if is_applicable(record.format, code):
        if super_tiebreak is None or not super_tiebreak.score:
            return super_tiebreak_mismatch(f"{code} requires a super tiebreak score")
        if super_tiebreak.winner is not record.winner:
            return super_tiebreak_mismatch(
                "the super tiebreak winner must be the match winner"
            )
        problem = check_super_tiebreak_score(super_tiebreak.score)
        if problem is not None:
            return problem
    elif super_tiebreak is not None:
        return super_tiebreak_mismatch(
            f"a super tiebreak is not played in a {record.format.value} {code} match"
        )

    for set_number, set_record in enumerate(record.sets, start=1):
        if set_record.winner is None:
            return incomplete_record(f"set {set_number} has no winner")
        if set_record.score and set_record.tiebreak_score:
            return conflicting_scores(
                f"set {set_number} has both a set score and a tiebreak score"
            )
        if set_record.score:
            problem = check_set_score(set_record.score)
            if problem is not None:
                return problem
        elif set_record.tiebreak_score:
            problem = check_tiebreak_score(set_record.tiebreak_score)
            if problem is not None:
                return problem
        elif not rules.is_straight_sets:
            return incomplete_record(f"set {set_number} has no score")

    sets_won = {side: 0 for side in Side}
    for set_record in record.sets:
        sets_won[set_record.winner] += 1
    if super_tiebreak is not None:
        sets_won[super_tiebreak.winner] += 1
    for side in Side:
        if sets_won[side] != code.sets_for(side):
            return incomplete_record(
                f"set winners give {sets_won[Side.HOME]}-{sets_won[Side.AWAY]}, "
                f"but the result is {code}"
            )

    return representation_conflict(project(record))


def validate(record: MatchResultRecord) -> ValidationResult:
    """Check every invariant of a record about to be submitted."""
    return ValidationResult(_first_problem(record))
