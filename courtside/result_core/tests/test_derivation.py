"""
Tests for set winner derivation and set score suggestions.
"""

import unittest

from courtside.result_core.derivation import (
    derive_set_winners,
    suggest_set_score,
    suggest_set_scores,
)
from courtside.result_core.errors import ErrorKind, Rejection
from courtside.result_core.structure import MatchFormat, ResultCode
from courtside.result_core.tests.test_utils import AWAY, HOME


class SetWinnerDeriverTests(unittest.TestCase):
    def test_straight_sets_are_assigned_to_winner(self):
        winners = derive_set_winners(MatchFormat.STANDARD_BO3, HOME, ResultCode(2, 0))
        self.assertEqual(winners, [HOME, HOME])

    def test_straight_sets_away(self):
        winners = derive_set_winners(MatchFormat.BO5, AWAY, ResultCode(0, 3))
        self.assertEqual(winners, [AWAY, AWAY, AWAY])

    def test_split_sets_are_left_to_the_operator(self):
        winners = derive_set_winners(MatchFormat.BO5, HOME, ResultCode(3, 2))
        self.assertEqual(winners, [None, None, None, None, None])

    def test_amateur_split_sets_have_two_entries(self):
        winners = derive_set_winners(
            MatchFormat.AMATEUR_BO3_SUPER_TIEBREAK, AWAY, ResultCode(1, 2)
        )
        self.assertEqual(winners, [None, None])

    def test_code_must_be_won_by_winning_side(self):
        outcome = derive_set_winners(MatchFormat.STANDARD_BO3, HOME, ResultCode(0, 2))
        self.assertIsInstance(outcome, Rejection)
        self.assertEqual(outcome.kind, ErrorKind.INVALID_RESULT_CODE)

    def test_code_must_exist_in_format(self):
        outcome = derive_set_winners(MatchFormat.STANDARD_BO3, HOME, ResultCode(3, 1))
        self.assertEqual(outcome.kind, ErrorKind.INVALID_RESULT_CODE)


class SetScoreSuggesterTests(unittest.TestCase):
    def test_straight_sets_default_scores(self):
        code = ResultCode(2, 0)
        winners = derive_set_winners(MatchFormat.STANDARD_BO3, HOME, code)
        scores = suggest_set_scores(winners, MatchFormat.STANDARD_BO3, code)
        self.assertEqual(scores, ["6-4", "6-4"])

    def test_unassigned_sets_get_nothing(self):
        code = ResultCode(2, 1)
        scores = suggest_set_scores(
            [HOME, None, AWAY], MatchFormat.STANDARD_BO3, code
        )
        self.assertEqual(scores, ["6-4", None, "6-4"])

    def test_amateur_third_set_is_suppressed(self):
        code = ResultCode(1, 2)
        scores = suggest_set_scores(
            [HOME, AWAY, AWAY], MatchFormat.AMATEUR_BO3_SUPER_TIEBREAK, code
        )
        self.assertEqual(scores, ["6-4", "6-4"])

    def test_amateur_straight_sets_are_not_suppressed(self):
        code = ResultCode(2, 0)
        scores = suggest_set_scores(
            [HOME, HOME], MatchFormat.AMATEUR_BO3_SUPER_TIEBREAK, code
        )
        self.assertEqual(scores, ["6-4", "6-4"])

    def test_retirement_gets_no_suggestions(self):
        code = ResultCode(2, 0, retired=True)
        scores = suggest_set_scores([HOME, HOME], MatchFormat.STANDARD_BO3, code)
        self.assertEqual(scores, [None, None])

    def test_custom_default(self):
        self.assertEqual(suggest_set_score(HOME, "6-3"), "6-3")
        self.assertIsNone(suggest_set_score(None, "6-3"))


if __name__ == "__main__":
    unittest.main()
