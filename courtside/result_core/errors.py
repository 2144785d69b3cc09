"""
Error taxonomy for the result engine.

Every expected domain violation is returned as a Rejection value rather than
raised, so callers (forms, services, commands) decide how to surface it.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Closed set of reasons the engine can reject an input or a record."""

    INVALID_RESULT_CODE = "invalid_result_code"
    WRONG_PARTICIPANT_MODE = "wrong_participant_mode"
    INCOMPLETE_RECORD = "incomplete_record"
    CONFLICTING_SCORE_REPRESENTATION = "conflicting_score_representation"
    SUPER_TIEBREAK_MISMATCH = "super_tiebreak_mismatch"
    MALFORMED_SCORE = "malformed_score"


@dataclass(frozen=True)
class Rejection:
    """A structured, non-exceptional failure returned by engine functions."""

    kind: ErrorKind
    message: str

    def __bool__(self) -> bool:
        # Lets callers write `if not outcome:` for anything that may be rejected
        return False

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


def invalid_result_code(message: str) -> Rejection:
    return Rejection(ErrorKind.INVALID_RESULT_CODE, message)


def wrong_participant_mode(message: str) -> Rejection:
    return Rejection(ErrorKind.WRONG_PARTICIPANT_MODE, message)


def incomplete_record(message: str) -> Rejection:
    return Rejection(ErrorKind.INCOMPLETE_RECORD, message)


def conflicting_scores(message: str) -> Rejection:
    return Rejection(ErrorKind.CONFLICTING_SCORE_REPRESENTATION, message)


def super_tiebreak_mismatch(message: str) -> Rejection:
    return Rejection(ErrorKind.SUPER_TIEBREAK_MISMATCH, message)


def malformed_score(message: str) -> Rejection:
    return Rejection(ErrorKind.MALFORMED_SCORE, message)

