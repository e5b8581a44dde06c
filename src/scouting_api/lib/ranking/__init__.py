"""Relevance ranking: model ranker, keyword fallback and result assembly."""

from .assembler import assemble_results
from .fallback import PLAYER_MATCH_SCORE, REPORT_MATCH_SCORE, keyword_fallback
from .ranker import (
    MAX_PROMPT_PLAYERS,
    MAX_PROMPT_REPORTS,
    RankerError,
    RankerOutputInvalid,
    RankerUnavailable,
    RelevanceRanker,
    parse_ranked_entries,
)

__all__ = [
    "assemble_results",
    "keyword_fallback",
    "parse_ranked_entries",
    "MAX_PROMPT_PLAYERS",
    "MAX_PROMPT_REPORTS",
    "PLAYER_MATCH_SCORE",
    "REPORT_MATCH_SCORE",
    "RankerError",
    "RankerOutputInvalid",
    "RankerUnavailable",
    "RelevanceRanker",
]
