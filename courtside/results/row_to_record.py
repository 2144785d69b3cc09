"""
Transform result store rows back into result_core records.

Used both on the read path (score lines for result tables) and to re-hydrate
an existing result when an operator opens it for editing.
"""

from typing import Optional, Union

from courtside.result_core.errors import Rejection, wrong_participant_mode
from courtside.result_core.formats import parse_result_code, rules_for
from courtside.result_core.participants import side_for_identity
from courtside.result_core.structure import (
    MAX_SETS,
    MatchResultRecord,
    ParticipantMode,
    SetRecord,
    SuperTiebreak,
)
from courtside.result_core.super_tiebreak import sync_super_tiebreak
from courtside.result_core.tiebreaks import (
    normalize_tiebreak_score,
    restore_tiebreak_set_score,
)
from courtside.results.collaborators import MatchDescriptor, ResultRow
from courtside.results.record_to_row import SET_COLUMNS, set_column


def _blank_to_none(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _winner_columns(mode: ParticipantMode, prefix: str):
    """Return (active, inactive) winner column names for a row prefix."""
    id_column = f"{prefix}winner_id"
    team_column = f"{prefix}winner_team"
    if mode is ParticipantMode.SINGLES:
        return id_column, team_column
    return team_column, id_column


def _set_has_data(row: ResultRow, set_number: int) -> bool:
    return any(
        _blank_to_none(row.get(set_column(set_number, name))) for name in SET_COLUMNS
    )


def _read_side(row: ResultRow, match: MatchDescriptor, active: str, inactive: str):
    if _blank_to_none(row.get(inactive)) is not None:
        return wrong_participant_mode(
            f"{match.participants.mode.value} result has '{inactive}' set"
        )
    return side_for_identity(match.participants, _blank_to_none(row.get(active)))


def row_to_record(
    row: ResultRow, match: MatchDescriptor, for_editing: bool = False
) -> Union[MatchResultRecord, Rejection]:
    """Convert a store row into a MatchResultRecord.

    Args:
        row: The stored result columns
        match: The match the result belongs to (format and participants)
        for_editing: Restore the in-memory editing shape (tiebreak sets get
            their 7-6 score back, a missing super tiebreak is recreated)

    Returns:
        The record, or a Rejection if the row uses the wrong participant
        representation or an unreadable result code
    """
    mode = match.participants.mode
    # The match winner's team column has its own name in the store
    if mode is ParticipantMode.SINGLES:
        active, inactive = "winner_id", "match_winner_team"
    else:
        active, inactive = "match_winner_team", "winner_id"
    winner = _read_side(row, match, active, inactive)
    if isinstance(winner, Rejection):
        return winner

    code = None
    code_text = _blank_to_none(row.get("match_result"))
    if code_text is not None:
        code = parse_result_code(code_text)
        if isinstance(code, Rejection):
            return code

    rules = rules_for(match.format, code) if code is not None else None
    if rules is None or isinstance(rules, Rejection):
        # Without usable rules, keep every set that has any column filled in
        set_count = max(
            [n for n in range(1, MAX_SETS + 1) if _set_has_data(row, n)], default=0
        )
    else:
        set_count = rules.set_count

    sets = []
    for set_number in range(1, set_count + 1):
        set_active, set_inactive = _winner_columns(mode, f"set{set_number}_")
        set_winner = _read_side(row, match, set_active, set_inactive)
        if isinstance(set_winner, Rejection):
            return set_winner
        set_record = SetRecord(
            winner=set_winner,
            score=_blank_to_none(row.get(set_column(set_number, "score"))),
            tiebreak_score=normalize_tiebreak_score(
                row.get(set_column(set_number, "tiebreak_score"))
            ),
        )
        if for_editing:
            set_record = restore_tiebreak_set_score(set_record)
        sets.append(set_record)

    super_tiebreak = None
    st_active, st_inactive = _winner_columns(mode, "super_tiebreak_")
    st_winner = _read_side(row, match, st_active, st_inactive)
    if isinstance(st_winner, Rejection):
        return st_winner
    st_score = normalize_tiebreak_score(row.get("super_tiebreak_score"))
    if st_score is not None or st_winner is not None:
        super_tiebreak = SuperTiebreak(score=st_score, winner=st_winner)

    record = MatchResultRecord(
        format=match.format,
        participants=match.participants,
        winner=winner,
        result_code=code,
        sets=tuple(sets),
        super_tiebreak=super_tiebreak,
    )
    if for_editing:
        record = sync_super_tiebreak(record)
    return record
