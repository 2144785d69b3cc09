"""
State transitions for entering a match result.

Every operator action is an event; `apply_event` takes the current record and
an event and returns the next record, or a Rejection if the event does not
apply. Derivations (set winners, suggested scores, tiebreak clean-up, super
tiebreak winner) all happen here, so each one can be tested without a UI.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union

from courtside.result_core.derivation import (
    DEFAULT_SET_SCORE,
    derive_set_winners,
    suggest_set_score,
    suggest_set_scores,
)
from courtside.result_core.errors import (
    Rejection,
    incomplete_record,
    invalid_result_code,
    malformed_score,
    super_tiebreak_mismatch,
)
from courtside.result_core.formats import codes_for
from courtside.result_core.structure import (
    MatchFormat,
    MatchResultRecord,
    Participants,
    ResultCode,
    SetRecord,
    Side,
)
from courtside.result_core.super_tiebreak import (
    check_super_tiebreak_score,
    is_applicable,
    normalize_super_tiebreak_score,
    sync_super_tiebreak,
)
from courtside.result_core.tiebreaks import (
    check_tiebreak_score,
    clear_tiebreak,
    is_tiebreak_set,
    normalize_tiebreak_score,
    resolve_for_persistence,
)
from courtside.result_core.validation import check_set_score


@dataclass(frozen=True)
class MatchWinnerChosen:
    side: Optional[Side]


@dataclass(frozen=True)
class ResultCodeChosen:
    code: ResultCode


@dataclass(frozen=True)
class SetWinnerChosen:
    set_number: int
    side: Optional[Side]


@dataclass(frozen=True)
class SetScoreEntered:
    set_number: int
    score: Optional[str]


@dataclass(frozen=True)
class TiebreakScoreEntered:
    set_number: int
    tiebreak_score: Optional[str]


@dataclass(frozen=True)
class SuperTiebreakScoreEntered:
    score: Optional[str]


ResultEvent = Union[
    MatchWinnerChosen,
    ResultCodeChosen,
    SetWinnerChosen,
    SetScoreEntered,
    TiebreakScoreEntered,
    SuperTiebreakScoreEntered,
]

Transition = Union[MatchResultRecord, Rejection]


def new_record(match_format: MatchFormat, participants: Participants) -> MatchResultRecord:
    """An empty record, as opened by the "add result" flow."""
    return MatchResultRecord(format=match_format, participants=participants)


def _rebuild_sets(record: MatchResultRecord) -> MatchResultRecord:
    """Replace all sets with the ones derived from the winner and result code."""
    sets = ()
    if record.winner is not None and record.result_code is not None:
        winners = derive_set_winners(record.format, record.winner, record.result_code)
        if not isinstance(winners, Rejection):
            scores = suggest_set_scores(winners, record.format, record.result_code)
            sets = tuple(
                SetRecord(winner=winner, score=score)
                for winner, score in zip(winners, scores)
            )
    return sync_super_tiebreak(replace(record, sets=sets))


def _choose_winner(record: MatchResultRecord, side: Optional[Side]) -> Transition:
    if side is record.winner:
        return record
    if side is None:
        return replace(
            record, winner=None, result_code=None, sets=(), super_tiebreak=None
        )

    code = record.result_code
    if code is not None and code.winning_side is not side:
        code = code.mirrored()
    return _rebuild_sets(replace(record, winner=side, result_code=code))


def _choose_code(record: MatchResultRecord, code: ResultCode) -> Transition:
    if record.winner is None:
        return incomplete_record("choose the match winner before the result")
    legal_codes = codes_for(record.format, record.winner, include_retirements=True)
    if code not in legal_codes:
        return invalid_result_code(
            f"{code} is not a {record.winner.value} win in a "
            f"{record.format.value} match"
        )
    if code == record.result_code:
        return record
    return _rebuild_sets(replace(record, result_code=code))


def _set_or_rejection(
    record: MatchResultRecord, set_number: int
) -> Union[SetRecord, Rejection]:
    set_record = record.set_record(set_number)
    if set_record is None:
        return invalid_result_code(
            f"set {set_number} is not played in a {record.result_code or 'missing'} result"
        )
    return set_record


def _choose_set_winner(
    record: MatchResultRecord, set_number: int, side: Optional[Side]
) -> Transition:
    set_record = _set_or_rejection(record, set_number)
    if isinstance(set_record, Rejection):
        return set_record
    if side is set_record.winner:
        return record

    score = None
    if not record.result_code.retired:
        score = suggest_set_score(side, DEFAULT_SET_SCORE)
    # A new winner flips the orientation of the old score and tiebreak
    return record.with_set(set_number, SetRecord(winner=side, score=score))


def _enter_set_score(
    record: MatchResultRecord, set_number: int, score: Optional[str]
) -> Transition:
    set_record = _set_or_rejection(record, set_number)
    if isinstance(set_record, Rejection):
        return set_record

    score = (score or "").strip() or None
    if score is None:
        cleared = replace(set_record, score=None, tiebreak_score=None)
        return record.with_set(set_number, cleared)

    problem = check_set_score(score)
    if problem is not None:
        return problem
    updated = replace(set_record, score=score)
    if not is_tiebreak_set(score):
        updated = clear_tiebreak(updated)
    return record.with_set(set_number, updated)


def _enter_tiebreak_score(
    record: MatchResultRecord, set_number: int, tiebreak_score: Optional[str]
) -> Transition:
    set_record = _set_or_rejection(record, set_number)
    if isinstance(set_record, Rejection):
        return set_record

    tiebreak_score = normalize_tiebreak_score(tiebreak_score)
    if tiebreak_score is None:
        return record.with_set(set_number, clear_tiebreak(set_record))
    if not is_tiebreak_set(set_record.score):
        return malformed_score(f"set {set_number} was not decided by a tiebreak")

    problem = check_tiebreak_score(tiebreak_score)
    if problem is not None:
        return problem
    updated = replace(set_record, tiebreak_score=tiebreak_score)
    return record.with_set(set_number, updated)


def _enter_super_tiebreak_score(
    record: MatchResultRecord, score: Optional[str]
) -> Transition:
    if not is_applicable(record.format, record.result_code):
        return super_tiebreak_mismatch(
            f"a super tiebreak is not played for {record.result_code or 'this result'} "
            f"in a {record.format.value} match"
        )

    score = (score or "").strip() or None
    if score is not None:
        score = normalize_super_tiebreak_score(score)
        problem = check_super_tiebreak_score(score)
        if problem is not None:
            return problem
    record = sync_super_tiebreak(record)
    return replace(record, super_tiebreak=replace(record.super_tiebreak, score=score))


def apply_event(record: MatchResultRecord, event: ResultEvent) -> Transition:
    """Apply one operator action to a record."""
    if isinstance(event, MatchWinnerChosen):
        return _choose_winner(record, event.side)
    elif isinstance(event, ResultCodeChosen):
        return _choose_code(record, event.code)
    elif isinstance(event, SetWinnerChosen):
        return _choose_set_winner(record, event.set_number, event.side)
    elif isinstance(event, SetScoreEntered):
        return _enter_set_score(record, event.set_number, event.score)
    elif isinstance(event, TiebreakScoreEntered):
        return _enter_tiebreak_score(record, event.set_number, event.tiebreak_score)
    elif isinstance(event, SuperTiebreakScoreEntered):
        return _enter_super_tiebreak_score(record, event.score)
    raise TypeError(f"Unknown result event: {event!r}")


def apply_events(record: MatchResultRecord, *events: ResultEvent) -> Transition:
    """Apply events in order, stopping at the first rejection."""
    for event in events:
        record = apply_event(record, event)
        if isinstance(record, Rejection):
            return record
    return record


def prepare_for_submission(record: MatchResultRecord) -> MatchResultRecord:
    """Emit the record as it will be validated and persisted.

    Each set keeps a single score representation, and the super tiebreak is
    dropped or aligned with the match winner.
    """
    sets = tuple(resolve_for_persistence(set_record) for set_record in record.sets)
    return sync_super_tiebreak(replace(record, sets=sets))
