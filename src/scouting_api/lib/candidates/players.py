"""Player candidate source.

Reads a bounded slice of the ``players`` index and normalizes each row into
a :class:`PlayerCandidate`.  The full row is kept as ``record`` so ranked
results can be hydrated without a second round trip.
"""

import logging

from ...models import PlayerCandidate
from ..elasticsearch import iter_hit_sources, unwrap_es_response
from .base import CandidateSource

logger = logging.getLogger(__name__)


def as_str_list(value) -> list[str]:
    """Coerce a stored positions value into a list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value if v is not None]


def player_from_source(doc_id: str, src: dict) -> PlayerCandidate:
    """Build a candidate from a player document ``_source``."""
    age = src.get("age")
    return PlayerCandidate(
        id=str(doc_id),
        name=src.get("name"),
        club=src.get("club"),
        positions=as_str_list(src.get("positions")),
        age=int(age) if isinstance(age, (int, float)) else None,
        nationality=src.get("nationality"),
        region=src.get("region"),
        contract_status=src.get("contract_status"),
        record={**src, "id": str(doc_id)},
    )


async def fetch_players(es, index: str, limit: int) -> list[PlayerCandidate]:
    """Return up to *limit* players from *index*, in index order."""
    resp = await es.search(index=index, query={"match_all": {}}, size=limit)
    data = unwrap_es_response(resp)

    players: list[PlayerCandidate] = []
    for doc_id, src in iter_hit_sources(data):
        if doc_id is None:
            logger.debug("Skipping player hit without an id")
            continue
        players.append(player_from_source(doc_id, src))
    return players


class PlayerCandidateSource(CandidateSource):
    @property
    def kind(self) -> str:
        return "player"

    async def fetch(self, es, limit: int) -> list[PlayerCandidate]:
        return await fetch_players(es, self.index, limit)
