"""
In-memory stand-ins for the match catalog and the result store.
"""

from courtside.result_core.structure import (
    DoublesParticipants,
    MatchFormat,
    SinglesParticipants,
)
from courtside.results.collaborators import MatchDescriptor
from courtside.results.exceptions import ResultStoreError


def singles_match(match_format=MatchFormat.STANDARD_BO3, match_id="m-1"):
    return MatchDescriptor(
        match_id=match_id,
        format=match_format,
        participants=SinglesParticipants(home_id="player-a", away_id="player-b"),
        home_name="Ana Ivanova",
        away_name="Bea Lopez",
    )


def doubles_match(match_format=MatchFormat.STANDARD_BO3, match_id="m-2"):
    return MatchDescriptor(
        match_id=match_id,
        format=match_format,
        participants=DoublesParticipants(),
        home_name="Ivanova / Park",
        away_name="Lopez / Berg",
    )


class InMemoryMatchCatalog:
    def __init__(self, *matches):
        self.matches = {match.match_id: match for match in matches}

    def get_match(self, match_id):
        return self.matches.get(match_id)


class InMemoryResultStore:
    """Keeps one row per match; can be told to fail the next write."""

    def __init__(self):
        self.rows = {}
        self.calls = []
        self.fail_writes = False
        self.on_write = None

    def get(self, match_id):
        return self.rows.get(match_id)

    def _write(self, action, match_id, row):
        self.calls.append((action, match_id))
        if self.on_write is not None:
            self.on_write(match_id)
        if self.fail_writes:
            raise ResultStoreError(f"{action} refused for match {match_id}")
        saved = dict(row, id=f"result-{match_id}")
        self.rows[match_id] = saved
        return saved

    def create(self, match_id, row):
        return self._write("create", match_id, row)

    def update(self, match_id, row):
        return self._write("update", match_id, row)

    def delete(self, result_id):
        self.calls.append(("delete", result_id))
        if self.fail_writes:
            raise ResultStoreError(f"delete refused for {result_id}")
        for match_id, row in list(self.rows.items()):
            if row.get("id") == result_id:
                del self.rows[match_id]
