"""
Contracts for the services the result entry flow depends on.

The match catalog and the result store live outside this project (a hosted
database behind an API). They are described here as Protocols so the form,
the submission service and the tests can be written against them.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from courtside.result_core.structure import MatchFormat, Participants


ResultRow = Dict[str, Any]


@dataclass(frozen=True)
class MatchDescriptor:
    """What the match catalog tells us about a match."""

    match_id: str
    format: MatchFormat
    participants: Participants
    status: str = "finished"
    home_name: str = ""
    away_name: str = ""


class MatchCatalog(Protocol):
    def get_match(self, match_id: str) -> Optional[MatchDescriptor]:
        ...


class ResultStore(Protocol):
    """Persistence for result rows.

    Each call is a single attempt; failures raise ResultStoreError.
    """

    def get(self, match_id: str) -> Optional[ResultRow]:
        ...

    def create(self, match_id: str, row: ResultRow) -> ResultRow:
        ...

    def update(self, match_id: str, row: ResultRow) -> ResultRow:
        ...

    def delete(self, result_id: str) -> None:
        ...
