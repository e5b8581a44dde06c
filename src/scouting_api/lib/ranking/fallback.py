"""Deterministic keyword fallback.

Used whenever the model ranking fails.  The whole query is matched as a
case-insensitive substring against each candidate's salient text.  Scores
are fixed per entity kind, so the output depends only on the inputs.
"""

from ...models import PlayerCandidate, RankedEntry, ReportCandidate

PLAYER_MATCH_SCORE = 0.7
REPORT_MATCH_SCORE = 0.6


def player_text(player: PlayerCandidate) -> str:
    return " ".join(
        [
            player.name or "",
            player.club or "",
            " ".join(player.positions),
            player.nationality or "",
        ]
    )


def report_text(report: ReportCandidate) -> str:
    return " ".join([report.player_name or "", report.player_club or ""])


def describe_player(player: PlayerCandidate) -> str:
    positions = ", ".join(player.positions) if player.positions else "Unknown"
    age = player.age if player.age is not None else "Unknown"
    return f"{positions} at {player.club or 'Unknown Club'} • Age {age} • {player.nationality or 'Unknown'}"


def keyword_fallback(
    query: str,
    players: list[PlayerCandidate],
    reports: list[ReportCandidate],
    limit: int,
) -> list[RankedEntry]:
    """Return up to *limit* substring matches, players before reports."""
    needle = query.strip().lower()
    results: list[RankedEntry] = []

    for player in players:
        if needle in player_text(player).lower():
            results.append(
                RankedEntry(
                    type="player",
                    id=player.id,
                    title=player.name or "Unknown Player",
                    description=describe_player(player),
                    relevance_score=PLAYER_MATCH_SCORE,
                )
            )

    for report in reports:
        if needle in report_text(report).lower():
            results.append(
                RankedEntry(
                    type="report",
                    id=report.id,
                    title=f"Report: {report.player_name or 'Unknown Player'}",
                    description=f"{report.status or 'unknown'} report for {report.player_club or 'Unknown Club'}",
                    relevance_score=REPORT_MATCH_SCORE,
                )
            )

    return results[:limit]
