"""Report candidate source.

Reports only store a ``player_id``.  The ranker needs the player's name,
club and positions, so they are joined in at fetch time:

1. Read a bounded slice of the ``reports`` index.
2. Look up the referenced players in the ``players`` index by ``_id``.
3. Attach each player's summary under the report's ``players`` key.

The join is an inner join: reports whose player is missing are dropped.
"""

import logging

from ...models import ReportCandidate
from ..elasticsearch import iter_hit_sources, unwrap_es_response
from .base import CandidateSource
from .players import as_str_list

logger = logging.getLogger(__name__)

# Player fields copied onto each report.
JOINED_PLAYER_FIELDS = ["name", "club", "positions"]


async def fetch_player_summaries(
    es,
    players_index: str,
    player_ids: list[str],
) -> dict[str, dict]:
    """Return ``{player_id: {"name", "club", "positions"}}`` for *player_ids*.

    Ids with no matching player document are absent from the result.
    """
    if not player_ids:
        return {}

    resp = await es.search(
        index=players_index,
        query={"ids": {"values": player_ids}},
        size=len(player_ids),
        _source=JOINED_PLAYER_FIELDS,
    )
    data = unwrap_es_response(resp)

    summaries: dict[str, dict] = {}
    for doc_id, src in iter_hit_sources(data):
        if doc_id is None:
            continue
        summaries[str(doc_id)] = {field: src.get(field) for field in JOINED_PLAYER_FIELDS}
    return summaries


def report_from_source(doc_id: str, src: dict, player: dict) -> ReportCandidate:
    """Build a candidate from a report ``_source`` and its joined player."""
    return ReportCandidate(
        id=str(doc_id),
        status=src.get("status"),
        player_name=player.get("name"),
        player_club=player.get("club"),
        player_positions=as_str_list(player.get("positions")),
        record={**src, "id": str(doc_id), "players": player},
    )


async def fetch_reports(
    es,
    index: str,
    players_index: str,
    limit: int,
) -> list[ReportCandidate]:
    """Return up to *limit* reports from *index* with their players joined in."""
    resp = await es.search(index=index, query={"match_all": {}}, size=limit)
    data = unwrap_es_response(resp)

    rows: list[tuple[str, dict]] = [
        (str(doc_id), src) for doc_id, src in iter_hit_sources(data) if doc_id is not None
    ]
    player_ids = sorted({str(src["player_id"]) for _, src in rows if src.get("player_id")})
    summaries = await fetch_player_summaries(es, players_index, player_ids)

    reports: list[ReportCandidate] = []
    for doc_id, src in rows:
        player = summaries.get(str(src.get("player_id")))
        if player is None:
            logger.debug("Dropping report %s: player %s not found", doc_id, src.get("player_id"))
            continue
        reports.append(report_from_source(doc_id, src, player))
    return reports


class ReportCandidateSource(CandidateSource):
    """Reports joined with their player; needs the players index for the join."""

    def __init__(self, index: str, players_index: str):
        super().__init__(index)
        self.players_index = players_index

    @property
    def kind(self) -> str:
        return "report"

    async def fetch(self, es, limit: int) -> list[ReportCandidate]:
        return await fetch_reports(es, self.index, self.players_index, limit)
