"""Tests for the keyword fallback matcher."""

import pytest

from ...models import PlayerCandidate, ReportCandidate
from ..ranking.fallback import (
    PLAYER_MATCH_SCORE,
    REPORT_MATCH_SCORE,
    keyword_fallback,
)


@pytest.fixture
def players():
    return [
        PlayerCandidate(id="p1", name="Mohamed Salah", club="Liverpool", positions=["RW", "ST"], age=31, nationality="Egypt"),
        PlayerCandidate(id="p2", name="Virgil van Dijk", club="Liverpool", positions=["CB"], age=32, nationality="Netherlands"),
        PlayerCandidate(id="p3", name="Bukayo Saka", club="Arsenal", positions=["RW"], age=22, nationality="England"),
    ]


@pytest.fixture
def reports():
    return [
        ReportCandidate(id="r1", status="submitted", player_name="Mohamed Salah", player_club="Liverpool"),
        ReportCandidate(id="r2", status="draft", player_name="Bukayo Saka", player_club="Arsenal"),
        ReportCandidate(id="r3", status="draft", player_name="Virgil van Dijk", player_club="Liverpool"),
    ]


class TestKeywordFallback:
    def test_club_match_returns_player_with_fixed_score(self, players):
        results = keyword_fallback("Liverpool", players[:1], [], limit=10)

        assert len(results) == 1
        assert results[0].type == "player"
        assert results[0].id == "p1"
        assert results[0].title == "Mohamed Salah"
        assert results[0].relevance_score == PLAYER_MATCH_SCORE == 0.7

    def test_match_is_case_insensitive(self, players):
        results = keyword_fallback("mohamed SALAH", players, [], limit=10)
        assert [r.id for r in results] == ["p1"]

    @pytest.mark.parametrize("query,expected", [
        ("Salah", ["p1"]),
        ("arsenal", ["p3"]),
        ("CB", ["p2"]),
        ("netherlands", ["p2"]),
    ])
    def test_matches_player_fields(self, players, query, expected):
        results = keyword_fallback(query, players, [], limit=10)
        assert [r.id for r in results] == expected

    def test_report_match_has_fixed_score_and_title(self, reports):
        results = keyword_fallback("Saka", [], reports, limit=10)

        assert len(results) == 1
        assert results[0].type == "report"
        assert results[0].title == "Report: Bukayo Saka"
        assert results[0].description == "draft report for Arsenal"
        assert results[0].relevance_score == REPORT_MATCH_SCORE == 0.6

    def test_report_status_is_not_matched(self, reports):
        assert keyword_fallback("draft", [], reports, limit=10) == []

    def test_players_precede_reports_in_insertion_order(self, players, reports):
        results = keyword_fallback("liverpool", players, reports, limit=10)
        assert [(r.type, r.id) for r in results] == [
            ("player", "p1"),
            ("player", "p2"),
            ("report", "r1"),
            ("report", "r3"),
        ]

    def test_truncates_to_limit_keeping_first_matches(self, players, reports):
        # every candidate contains an "a", so six matches are available
        results = keyword_fallback("a", players, reports, limit=2)
        assert [r.id for r in results] == ["p1", "p2"]

    def test_no_match_returns_empty(self, players, reports):
        assert keyword_fallback("Real Madrid", players, reports, limit=10) == []

    def test_player_description(self, players):
        results = keyword_fallback("Saka", players, [], limit=10)
        assert results[0].description == "RW at Arsenal • Age 22 • England"

    def test_missing_fields_do_not_break_matching(self):
        sparse = [PlayerCandidate(id="x1", name="Unknown Trialist")]
        results = keyword_fallback("trialist", sparse, [], limit=10)
        assert results[0].description == "Unknown at Unknown Club • Age Unknown • Unknown"

    def test_deterministic_across_runs(self, players, reports):
        first = keyword_fallback("liverpool", players, reports, limit=10)
        second = keyword_fallback("liverpool", players, reports, limit=10)
        assert [r.model_dump_json() for r in first] == [r.model_dump_json() for r in second]
