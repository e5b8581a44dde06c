"""Concurrent candidate fetching.

Players and reports are independent reads, so both sources run at the same
time.  A failing source is logged and contributes an empty list; the other
kind is still returned.
"""

import asyncio
import logging

from ...config import Settings
from .base import CandidateSet, CandidateSource
from .players import PlayerCandidateSource
from .reports import ReportCandidateSource

logger = logging.getLogger(__name__)


def build_sources(settings: Settings) -> tuple[CandidateSource, CandidateSource]:
    """Create the player and report sources for the configured indices."""
    return (
        PlayerCandidateSource(index=settings.players_index),
        ReportCandidateSource(
            index=settings.reports_index, players_index=settings.players_index
        ),
    )


async def _fetch_or_empty(source: CandidateSource, es, limit: int) -> list:
    try:
        return await source.fetch(es, limit)
    except Exception:
        logger.exception("Error fetching %s candidates from '%s'", source.kind, source.index)
        return []


async def fetch_candidates(
    es,
    players: CandidateSource,
    reports: CandidateSource,
    limit: int,
) -> CandidateSet:
    """Fetch up to *limit* players and up to *limit* reports concurrently."""
    found_players, found_reports = await asyncio.gather(
        _fetch_or_empty(players, es, limit),
        _fetch_or_empty(reports, es, limit),
    )
    logger.info("Found players: %d", len(found_players))
    logger.info("Found reports: %d", len(found_reports))
    return CandidateSet(players=found_players, reports=found_reports)
