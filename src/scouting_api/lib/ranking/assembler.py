"""Result assembly: hydrate ranked entries with the rows already fetched."""

from ...models import RankedEntry, RankedResult
from ..candidates import CandidateSet


def assemble_results(
    entries: list[RankedEntry],
    candidates: CandidateSet,
    limit: int,
) -> list[RankedResult]:
    """Attach each entry's fetched record as ``metadata``.

    Entries whose ``(type, id)`` was not fetched keep ``metadata=None``.
    The output is stable-sorted by score, highest first, and cut to *limit*.
    """
    results = [
        RankedResult(
            **entry.model_dump(),
            metadata=candidates.lookup(entry.type, entry.id),
        )
        for entry in entries
    ]
    results.sort(key=lambda r: r.relevance_score, reverse=True)
    return results[:limit]
