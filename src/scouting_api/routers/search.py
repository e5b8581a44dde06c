"""Search router – AI-assisted search over players and scouting reports.

POST /ai-search
    Rank fetched players and reports against a free-text query with the
    language model, falling back to keyword matching when the model call or
    its output fails.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..lib.candidates import build_sources, fetch_candidates
from ..lib.ranking import (
    RankerError,
    assemble_results,
    keyword_fallback,
)
from ..models import ErrorResponse, SearchRequest, SearchResponse

router = APIRouter(tags=["search"])

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/ai-search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def ai_search(request: Request, payload: SearchRequest):
    """Search players and reports with a natural-language query.

    Results are ranked by the language model when it is configured and
    answers with a valid result list; otherwise by keyword matching.
    ``rankedBy`` tells the two apart.
    """
    query = (payload.query or "").strip()
    if not query:
        return _error(400, "Search query is required")

    logger.info("Processing search query: %s", query)

    try:
        settings = request.app.state.settings
        ranker = getattr(request.app.state, "ranker", None)

        players_source, reports_source = build_sources(settings)
        candidates = await fetch_candidates(
            request.app.state.es,
            players_source,
            reports_source,
            settings.candidate_fetch_limit,
        )

        entries = None
        if ranker is not None:
            players, reports = ranker.truncate(candidates.players, candidates.reports)
            try:
                entries = await ranker.rank(
                    query, players, reports, payload.limit, search_type=payload.search_type
                )
                ranked_by = "model"
                considered = len(players) + len(reports)
            except RankerError as exc:
                logger.warning("Ranker failed, using keyword fallback: %s", exc)

        if entries is None:
            entries = keyword_fallback(
                query, candidates.players, candidates.reports, payload.limit
            )
            ranked_by = "fallback"
            considered = len(candidates)

        results = assemble_results(entries, candidates, payload.limit)
    except Exception as exc:
        logger.exception("Error in ai-search")
        return _error(500, str(exc))

    logger.info("Search completed, found %d results (%s)", len(results), ranked_by)

    return SearchResponse(
        results=results,
        query=payload.query,
        total_results=len(results),
        ranked_by=ranked_by,
        candidates_considered=considered,
    )
