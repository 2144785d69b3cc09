"""Exceptions raised by the result entry layer."""

from courtside.result_core.errors import Rejection


class ResultEntryError(Exception):
    """Base exception for result entry errors."""

    pass


class MatchNotFound(ResultEntryError):
    """Raised when the match catalog does not know a match id."""

    pass


class SubmissionInProgress(ResultEntryError):
    """Raised when a result for the same match is already being submitted."""

    pass


class InvalidResultRecord(ResultEntryError):
    """Raised when a record that fails validation is submitted anyway."""

    def __init__(self, rejection: Rejection):
        super().__init__(str(rejection))
        self.rejection = rejection


class ResultStoreError(ResultEntryError):
    """Raised when the result store rejects a create, update or delete."""

    pass
