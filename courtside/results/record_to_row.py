"""
Convert result_core records to the result store's row layout.

The store keeps one flat row per match result with numbered set columns
(set1_winner_id ... set5_tiebreak_score). Column names are built only here
and in row_to_record; the engine itself addresses sets by index.
"""

from courtside.result_core.participants import project
from courtside.result_core.structure import MAX_SETS, MatchResultRecord
from courtside.results.collaborators import ResultRow


SET_COLUMNS = ("winner_id", "winner_team", "score", "tiebreak_score")


def set_column(set_number: int, name: str) -> str:
    return f"set{set_number}_{name}"


def empty_row() -> ResultRow:
    """A row with every result column present and null."""
    row = {
        "winner_id": None,
        "match_winner_team": None,
        "match_result": None,
        "super_tiebreak_score": None,
        "super_tiebreak_winner_id": None,
        "super_tiebreak_winner_team": None,
    }
    for set_number in range(1, MAX_SETS + 1):
        for name in SET_COLUMNS:
            row[set_column(set_number, name)] = None
    return row


def record_to_row(record: MatchResultRecord) -> ResultRow:
    """Convert a record resolved for persistence into a store row.

    Args:
        record: A record that has passed prepare_for_submission and validate

    Returns:
        dict: Every result column; columns of the inactive participant
        representation and of sets not played are None.
    """
    projected = project(record)
    row = empty_row()
    row["winner_id"] = projected.winner_id
    row["match_winner_team"] = projected.winner_team
    row["match_result"] = str(projected.result_code) if projected.result_code else None

    for set_number, projected_set in enumerate(projected.sets, start=1):
        row[set_column(set_number, "winner_id")] = projected_set.winner_id
        row[set_column(set_number, "winner_team")] = projected_set.winner_team
        row[set_column(set_number, "score")] = projected_set.score
        row[set_column(set_number, "tiebreak_score")] = projected_set.tiebreak_score

    row["super_tiebreak_score"] = projected.super_tiebreak_score
    row["super_tiebreak_winner_id"] = projected.super_tiebreak_winner_id
    row["super_tiebreak_winner_team"] = projected.super_tiebreak_winner_team
    return row
