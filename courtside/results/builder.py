"""
Random match result simulation for demo data and tests.

Results are produced by replaying operator events through the result engine,
so every simulated record is one an operator could have entered.
"""

import random
from typing import Optional

from courtside.result_core.errors import Rejection
from courtside.result_core.formats import codes_for, rules_for
from courtside.result_core.structure import MatchFormat, MatchResultRecord, Participants, Side
from courtside.result_core.tiebreaks import is_tiebreak_set
from courtside.result_core.transitions import (
    MatchWinnerChosen,
    ResultCodeChosen,
    SetScoreEntered,
    SetWinnerChosen,
    SuperTiebreakScoreEntered,
    TiebreakScoreEntered,
    apply_events,
    new_record,
    prepare_for_submission,
)


# Set scores, set winner's games first
SET_SCORES = ["6-0", "6-1", "6-2", "6-3", "6-4", "7-5", "7-6"]


def simulate_super_tiebreak_score(rng: random.Random) -> str:
    """A plausible first-to-10, win-by-2 score, winner first."""
    if rng.random() < 0.2:
        loser_points = rng.randint(9, 14)
        return f"{loser_points + 2}-{loser_points}"
    return f"10-{rng.randint(0, 8)}"


def _set_winners(record: MatchResultRecord, rng: random.Random):
    """Pick which sets the match loser took; the winner always takes the last set."""
    code = record.result_code
    set_count = len(record.sets)
    winners = [record.winner] * set_count
    if code.loser_sets == 0:
        return winners

    if rules_for(record.format, code).third_set_is_super_tiebreak:
        # Split one set all, decided by the super tiebreak
        candidates = list(range(set_count))
    else:
        candidates = list(range(set_count - 1))
    for index in rng.sample(candidates, code.loser_sets):
        winners[index] = record.winner.opponent
    return winners


def simulate_match_result(
    match_format: MatchFormat,
    participants: Participants,
    rng: Optional[random.Random] = None,
) -> MatchResultRecord:
    """Simulate a complete result, resolved for persistence.

    Args:
        match_format: Format of the match
        participants: Singles or doubles participants
        rng: Random source (default: a fresh unseeded Random)

    Returns:
        A record that passes validate()
    """
    rng = rng or random.Random()
    winner = rng.choice(list(Side))
    code = rng.choice(codes_for(match_format, winner))

    record = apply_events(
        new_record(match_format, participants),
        MatchWinnerChosen(winner),
        ResultCodeChosen(code),
    )
    events = []
    for set_number, set_winner in enumerate(_set_winners(record, rng), start=1):
        score = rng.choice(SET_SCORES)
        events.append(SetWinnerChosen(set_number, set_winner))
        events.append(SetScoreEntered(set_number, score))
        if is_tiebreak_set(score):
            events.append(TiebreakScoreEntered(set_number, f"7-{rng.randint(0, 6)}"))
    if record.super_tiebreak is not None:
        events.append(SuperTiebreakScoreEntered(simulate_super_tiebreak_score(rng)))

    record = apply_events(record, *events)
    if isinstance(record, Rejection):
        raise ValueError(f"Simulated result was rejected: {record}")
    return prepare_for_submission(record)
