"""
Tests for score line rendering.
"""

import unittest

from courtside.result_core.display import format_score_line, format_score_summary
from courtside.result_core.structure import MatchFormat
from courtside.result_core.tests.test_utils import AWAY, HOME, build_record


class ScoreLineTests(unittest.TestCase):
    def test_sets_lost_by_match_winner_are_reversed(self):
        record = build_record(
            MatchFormat.STANDARD_BO3,
            HOME,
            "2-1",
            [(HOME, "6-4", None), (AWAY, "6-3", None), (HOME, "7-5", None)],
        )
        self.assertEqual(format_score_line(record), ["6-4", "3-6", "7-5"])

    def test_away_winner(self):
        record = build_record(
            MatchFormat.STANDARD_BO3,
            AWAY,
            "1-2",
            [(AWAY, "6-2", None), (HOME, "6-4", None), (AWAY, "6-1", None)],
        )
        self.assertEqual(format_score_summary(record), "6-2 4-6 6-1")

    def test_tiebreak_notation(self):
        record = build_record(
            MatchFormat.BO5,
            HOME,
            "3-1",
            [
                (HOME, None, "7-3"),
                (AWAY, None, "7-5"),
                (HOME, "6-4", None),
                (HOME, None, "7-0"),
            ],
        )
        self.assertEqual(
            format_score_line(record), ["7-6(3)", "6-7(5)", "6-4", "7-6(0)"]
        )

    def test_super_tiebreak_is_rendered_last(self):
        record = build_record(
            MatchFormat.AMATEUR_BO3_SUPER_TIEBREAK,
            AWAY,
            "1-2",
            [(HOME, "6-4", None), (AWAY, "6-2", None)],
            ("10-8", AWAY),
        )
        self.assertEqual(format_score_line(record), ["4-6", "6-2", "10-8"])
        self.assertEqual(format_score_summary(record), "4-6 6-2 10-8")

    def test_sets_without_scores_are_skipped(self):
        record = build_record(
            MatchFormat.STANDARD_BO3, HOME, "2-0", [(HOME, None, None), (HOME, "6-1", None)]
        )
        self.assertEqual(format_score_line(record), ["6-1"])

    def test_unreadable_scores_are_shown_as_stored(self):
        record = build_record(
            MatchFormat.STANDARD_BO3, HOME, "2-0", [(HOME, "6:4", None), (HOME, None, "9-9")]
        )
        self.assertEqual(format_score_line(record), ["6:4", "9-9"])

    def test_empty_record(self):
        record = build_record(MatchFormat.BO5, None, None)
        self.assertEqual(format_score_summary(record), "")


if __name__ == "__main__":
    unittest.main()
