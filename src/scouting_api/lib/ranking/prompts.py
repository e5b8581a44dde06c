"""Prompt construction for the relevance ranker.

Candidates are serialized to compact JSON with only the fields the model
needs; full rows stay server-side and are re-attached after ranking.
"""

import json

from ...models import PlayerCandidate, ReportCandidate

SYSTEM_PROMPT = (
    "You are an expert football scout and recruitment analyst. "
    "You judge how relevant players and scouting reports are to a "
    "recruitment search written in natural language. "
    "You answer with JSON only."
)

# What the model should weigh when judging relevance.
MATCHING_DIMENSIONS = [
    "Position and playing style (e.g. winger, ball-playing centre back)",
    "Age constraints (e.g. 'under 23', 'experienced')",
    "Nationality or region",
    "Current club",
    "Performance traits and qualities mentioned in the query",
]


def serialize_player(player: PlayerCandidate) -> dict:
    return {
        "type": "player",
        "id": player.id,
        "name": player.name,
        "club": player.club,
        "positions": player.positions,
        "age": player.age,
        "nationality": player.nationality,
        "region": player.region,
        "contractStatus": player.contract_status,
    }


def serialize_report(report: ReportCandidate) -> dict:
    return {
        "type": "report",
        "id": report.id,
        "status": report.status,
        "playerName": report.player_name,
        "playerClub": report.player_club,
        "playerPositions": report.player_positions,
    }


def serialize_candidates(
    players: list[PlayerCandidate],
    reports: list[ReportCandidate],
) -> str:
    """Serialize candidates as one compact JSON array, players first."""
    items = [serialize_player(p) for p in players] + [serialize_report(r) for r in reports]
    return json.dumps(items, ensure_ascii=False, separators=(",", ":"))


def build_user_prompt(
    query: str,
    players: list[PlayerCandidate],
    reports: list[ReportCandidate],
    limit: int,
    search_type: str | None = None,
) -> str:
    dimensions = "\n".join(f"- {d}" for d in MATCHING_DIMENSIONS)
    preference = (
        f'\nThe user is mainly interested in results of type "{search_type}".\n'
        if search_type
        else ""
    )
    return f"""Search query: "{query}"
{preference}
Consider these matching dimensions:
{dimensions}

Candidates:
{serialize_candidates(players, reports)}

Return ONLY a JSON array, with no other text, of the candidates relevant to the query, most relevant first.
Each element must be an object with exactly these fields:
- "type": "player" or "report", copied from the candidate
- "id": the candidate id, copied exactly
- "title": a short human-readable title
- "description": one sentence explaining why it matches
- "relevanceScore": a number between 0 and 1

Return at most {limit} elements. If nothing is relevant, return [].
"""


def build_messages(
    query: str,
    players: list[PlayerCandidate],
    reports: list[ReportCandidate],
    limit: int,
    search_type: str | None = None,
) -> list[dict]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": build_user_prompt(query, players, reports, limit, search_type),
        },
    ]
