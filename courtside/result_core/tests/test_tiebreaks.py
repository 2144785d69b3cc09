"""
Tests for set tiebreak and super tiebreak handling.
"""

import unittest

from courtside.result_core.errors import ErrorKind, Rejection
from courtside.result_core.structure import (
    MatchFormat,
    ResultCode,
    SetRecord,
    SuperTiebreak,
)
from courtside.result_core.super_tiebreak import (
    check_super_tiebreak_score,
    is_applicable,
    normalize_super_tiebreak_score,
    super_tiebreak_warning,
    sync_super_tiebreak,
)
from courtside.result_core.tests.test_utils import AWAY, HOME, build_record
from courtside.result_core.tiebreaks import (
    is_tiebreak_set,
    normalize_tiebreak_score,
    resolve_for_persistence,
    restore_tiebreak_set_score,
    tiebreak_loser_points,
    tiebreak_score_options,
)


class TiebreakCoordinatorTests(unittest.TestCase):
    def test_tiebreak_sets(self):
        self.assertTrue(is_tiebreak_set("7-6"))
        self.assertTrue(is_tiebreak_set("6-7"))
        self.assertTrue(is_tiebreak_set(" 7 - 6 "))
        for score in ("7-5", "6-4", "", None, "76"):
            self.assertFalse(is_tiebreak_set(score))

    def test_options(self):
        options = tiebreak_score_options()
        self.assertEqual(len(options), 14)
        self.assertEqual(options[0], "7-0")
        self.assertEqual(options[6], "7-6")
        self.assertEqual(options[7], "0-7")
        self.assertNotIn("7-7", options)

    def test_loser_points(self):
        self.assertEqual(tiebreak_loser_points("7-3"), 3)
        self.assertEqual(tiebreak_loser_points("5-7"), 5)
        self.assertEqual(tiebreak_loser_points("7-0"), 0)

    def test_loser_points_rejects_non_tiebreak_scores(self):
        for score in ("7-7", "8-6", "6-4", "x"):
            outcome = tiebreak_loser_points(score)
            self.assertIsInstance(outcome, Rejection)
            self.assertEqual(outcome.kind, ErrorKind.MALFORMED_SCORE)

    def test_resolve_keeps_only_tiebreak_score(self):
        resolved = resolve_for_persistence(SetRecord(HOME, "7-6", "7-3"))
        self.assertEqual(resolved, SetRecord(HOME, None, "7-3"))

    def test_resolve_keeps_plain_score(self):
        resolved = resolve_for_persistence(SetRecord(HOME, "6-4", None))
        self.assertEqual(resolved, SetRecord(HOME, "6-4", None))

    def test_resolve_treats_none_sentinel_as_no_tiebreak(self):
        resolved = resolve_for_persistence(SetRecord(AWAY, "7-6", "none"))
        self.assertEqual(resolved, SetRecord(AWAY, "7-6", None))

    def test_normalize(self):
        self.assertIsNone(normalize_tiebreak_score(None))
        self.assertIsNone(normalize_tiebreak_score(""))
        self.assertIsNone(normalize_tiebreak_score(" None "))
        self.assertEqual(normalize_tiebreak_score(" 7-2 "), "7-2")

    def test_restore_for_editing(self):
        restored = restore_tiebreak_set_score(SetRecord(HOME, None, "7-4"))
        self.assertEqual(restored, SetRecord(HOME, "7-6", "7-4"))
        plain = SetRecord(HOME, "6-2", None)
        self.assertEqual(restore_tiebreak_set_score(plain), plain)


class SuperTiebreakCoordinatorTests(unittest.TestCase):
    amateur = MatchFormat.AMATEUR_BO3_SUPER_TIEBREAK

    def test_applicability(self):
        self.assertTrue(is_applicable(self.amateur, ResultCode(2, 1)))
        self.assertTrue(is_applicable(self.amateur, ResultCode(1, 2)))
        self.assertTrue(is_applicable(self.amateur, ResultCode(1, 2, retired=True)))
        self.assertFalse(is_applicable(self.amateur, ResultCode(2, 0)))
        self.assertFalse(is_applicable(self.amateur, None))
        self.assertFalse(is_applicable(MatchFormat.STANDARD_BO3, ResultCode(2, 1)))
        self.assertFalse(is_applicable(MatchFormat.BO5, ResultCode(3, 2)))

    def test_sync_creates_and_forces_winner(self):
        record = build_record(self.amateur, AWAY, "1-2", [(None, None, None)] * 2)
        synced = sync_super_tiebreak(record)
        self.assertEqual(synced.super_tiebreak, SuperTiebreak(score=None, winner=AWAY))

    def test_sync_overrides_independent_winner(self):
        record = build_record(
            self.amateur, HOME, "2-1", [(HOME, "6-4", None)] * 2, ("10-7", AWAY)
        )
        synced = sync_super_tiebreak(record)
        self.assertEqual(synced.super_tiebreak, SuperTiebreak(score="10-7", winner=HOME))

    def test_sync_discards_when_not_applicable(self):
        record = build_record(
            self.amateur, HOME, "2-0", [(HOME, "6-4", None)] * 2, ("10-7", HOME)
        )
        self.assertIsNone(sync_super_tiebreak(record).super_tiebreak)

    def test_score_grammar_is_lenient(self):
        self.assertIsNone(check_super_tiebreak_score("10-8"))
        self.assertIsNone(check_super_tiebreak_score("15-13"))
        # Not a regulation score, still stored as typed
        self.assertIsNone(check_super_tiebreak_score("10-9"))
        outcome = check_super_tiebreak_score("ten-eight")
        self.assertEqual(outcome.kind, ErrorKind.MALFORMED_SCORE)

    def test_score_must_be_winner_first(self):
        for score in ("8-10", "10-10"):
            outcome = check_super_tiebreak_score(score)
            self.assertEqual(outcome.kind, ErrorKind.MALFORMED_SCORE, score)

    def test_normalize_puts_winner_first(self):
        self.assertEqual(normalize_super_tiebreak_score("3-10"), "10-3")
        self.assertEqual(normalize_super_tiebreak_score(" 12 - 10 "), "12-10")
        self.assertEqual(normalize_super_tiebreak_score(" ten "), "ten")

    def test_regulation_warning(self):
        self.assertIsNone(super_tiebreak_warning("10-8"))
        self.assertIsNone(super_tiebreak_warning("14-12"))
        self.assertIsNone(super_tiebreak_warning(None))
        self.assertIn("at least 10 points", super_tiebreak_warning("7-5"))
        self.assertIn("won by 2 points", super_tiebreak_warning("10-9"))


if __name__ == "__main__":
    unittest.main()
