"""Base abstraction for candidate sources.

Each source reads one entity kind (players or reports) from its own index
and returns normalized candidates.  Sources do no query-specific filtering:
they read a bounded slice of rows and leave relevance to the ranker.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from ...models import PlayerCandidate, ReportCandidate


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class CandidateSet(BaseModel):
    """Everything fetched for one search request, one list per entity kind."""

    players: list[PlayerCandidate] = Field(default_factory=list)
    reports: list[ReportCandidate] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.players) + len(self.reports)

    def lookup(self, entity_type: str, entity_id: str) -> dict | None:
        """Return the fetched record for ``(entity_type, entity_id)``, if any."""
        pool = self.players if entity_type == "player" else self.reports
        for candidate in pool:
            if candidate.type == entity_type and candidate.id == entity_id:
                return candidate.record
        return None


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class CandidateSource(ABC):
    """Abstract base class for a bounded reader of one entity kind.

    Subclasses must implement `kind` (property) and `fetch`.
    """

    def __init__(self, index: str):
        self.index = index

    @property
    @abstractmethod
    def kind(self) -> str:
        """Entity kind produced by this source (``player`` or ``report``)."""
        ...

    @abstractmethod
    async def fetch(self, es, limit: int) -> list:
        """Read up to *limit* candidates.

        Parameters
        ----------
        es:
            An ``AsyncElasticsearch`` client instance.
        limit:
            Maximum number of candidates to return.

        Returns
        -------
        list of ``PlayerCandidate`` or ``ReportCandidate``
        """
        ...
