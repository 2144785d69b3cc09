"""
Result submission for the operator console.

Glue between the result engine and the external match catalog and result
store: opens a record for a match (new or re-hydrated), validates it, and
persists it once, refusing a second submission for a match while one is in
flight.
"""

import logging
import threading
from contextlib import contextmanager
from typing import List, Optional

from courtside.result_core.display import format_score_line
from courtside.result_core.errors import Rejection
from courtside.result_core.structure import MatchResultRecord
from courtside.result_core.transitions import new_record, prepare_for_submission
from courtside.result_core.validation import validate
from courtside.results.collaborators import (
    MatchCatalog,
    MatchDescriptor,
    ResultRow,
    ResultStore,
)
from courtside.results.exceptions import (
    InvalidResultRecord,
    MatchNotFound,
    ResultStoreError,
    SubmissionInProgress,
)
from courtside.results.record_to_row import record_to_row
from courtside.results.row_to_record import row_to_record

logger = logging.getLogger(__name__)


class ResultSubmissionService:
    """Create, update and delete match results through the result store."""

    def __init__(self, catalog: MatchCatalog, store: ResultStore):
        self.catalog = catalog
        self.store = store
        self._in_flight = set()
        self._lock = threading.Lock()

    def get_match(self, match_id: str) -> MatchDescriptor:
        match = self.catalog.get_match(match_id)
        if match is None:
            raise MatchNotFound(f"Match {match_id} does not exist")
        return match

    def open_result(self, match_id: str) -> MatchResultRecord:
        """Return the editable record for a match: the stored one or a new one."""
        match = self.get_match(match_id)
        row = self.store.get(match_id)
        if row is None:
            return new_record(match.format, match.participants)

        record = row_to_record(row, match, for_editing=True)
        if isinstance(record, Rejection):
            raise InvalidResultRecord(record)
        return record

    def submit(self, match_id: str, record: MatchResultRecord) -> ResultRow:
        """Validate and persist a record, creating or updating the stored row.

        Raises:
            InvalidResultRecord: the record does not pass validation
            SubmissionInProgress: another submission for the match is running
            ResultStoreError: the store refused the write; it is not retried
        """
        match = self.get_match(match_id)
        emitted = prepare_for_submission(record)
        outcome = validate(emitted)
        if not outcome:
            logger.info(
                "Rejected result for match %s: %s", match.match_id, outcome.rejection
            )
            raise InvalidResultRecord(outcome.rejection)

        row = record_to_row(emitted)
        with self._submission(match_id):
            try:
                if self.store.get(match_id) is None:
                    saved = self.store.create(match_id, row)
                    action = "Created"
                else:
                    saved = self.store.update(match_id, row)
                    action = "Updated"
            except ResultStoreError:
                logger.error("Result store failed for match %s", match_id)
                raise
        logger.info("%s result %s for match %s", action, row["match_result"], match_id)
        return saved

    def delete(self, match_id: str, result_id: str) -> None:
        with self._submission(match_id):
            try:
                self.store.delete(result_id)
            except ResultStoreError:
                logger.error("Result store failed to delete result %s", result_id)
                raise
        logger.info("Deleted result %s of match %s", result_id, match_id)

    def score_line(self, match_id: str) -> Optional[List[str]]:
        """The display score line of a stored result, or None if there is none."""
        match = self.get_match(match_id)
        row = self.store.get(match_id)
        if row is None:
            return None
        record = row_to_record(row, match)
        if isinstance(record, Rejection):
            logger.warning("Unreadable result for match %s: %s", match_id, record)
            return None
        return format_score_line(record)

    @contextmanager
    def _submission(self, match_id: str):
        with self._lock:
            if match_id in self._in_flight:
                raise SubmissionInProgress(
                    f"A result for match {match_id} is already being saved"
                )
            self._in_flight.add(match_id)
        try:
            yield
        finally:
            with self._lock:
                self._in_flight.discard(match_id)
