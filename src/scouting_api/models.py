from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer
from pydantic.alias_generators import to_camel

EntityType = Literal["player", "report"]


class CamelModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Candidates
# ---------------------------------------------------------------------------

class PlayerCandidate(BaseModel):
    """A player row normalized for ranking."""

    type: Literal["player"] = "player"
    id: str
    name: str | None = None
    club: str | None = None
    positions: list[str] = Field(default_factory=list)
    age: int | None = None
    nationality: str | None = None
    region: str | None = None
    contract_status: str | None = None
    record: dict[str, Any] = Field(
        default_factory=dict, description="The full row as fetched"
    )


class ReportCandidate(BaseModel):
    """A scouting report joined with the name, club and positions of its player."""

    type: Literal["report"] = "report"
    id: str
    status: str | None = None
    player_name: str | None = None
    player_club: str | None = None
    player_positions: list[str] = Field(default_factory=list)
    record: dict[str, Any] = Field(
        default_factory=dict, description="The full row as fetched, player joined in"
    )


# ---------------------------------------------------------------------------
# Search request / results
# ---------------------------------------------------------------------------

class SearchRequest(CamelModel):
    # Optional: a missing query gets the same 400 as an empty one.
    query: str | None = Field(None, description="Free-text search query")
    limit: int = Field(10, ge=1, description="Maximum number of results")
    search_type: EntityType | None = Field(
        None, description="Preferred entity kind; advisory context for the ranker"
    )


class RankedEntry(CamelModel):
    """One ranked hit as produced by the ranker or the fallback matcher."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: EntityType
    id: str
    title: str
    description: str = ""
    relevance_score: float = Field(allow_inf_nan=False)

    @field_validator("relevance_score")
    @classmethod
    def _clamp_score(cls, v: float) -> float:
        return min(max(v, 0.0), 1.0)


class RankedResult(RankedEntry):
    """A ranked hit hydrated with the fetched record it refers to."""

    metadata: dict[str, Any] | None = None

    @model_serializer(mode="wrap")
    def _omit_missing_metadata(self, handler):
        # Unhydrated results carry no metadata key at all.
        data = handler(self)
        if self.metadata is None:
            data.pop("metadata", None)
        return data


class SearchResponse(CamelModel):
    results: list[RankedResult]
    query: str
    total_results: int
    ranked_by: Literal["model", "fallback"]
    candidates_considered: int


class ErrorResponse(BaseModel):
    error: str
