"""Candidate fetching for the search pipeline.

Provides bounded, per-kind readers of the persistence layer and a helper
that runs them concurrently with per-kind failure isolation.
"""

from .base import CandidateSet, CandidateSource
from .fetcher import build_sources, fetch_candidates
from .players import PlayerCandidateSource
from .reports import ReportCandidateSource

__all__ = [
    "CandidateSet",
    "CandidateSource",
    "build_sources",
    "fetch_candidates",
    "PlayerCandidateSource",
    "ReportCandidateSource",
]
