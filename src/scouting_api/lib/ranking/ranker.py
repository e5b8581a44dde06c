"""Language-model relevance ranker.

Sends the query and a truncated, compact view of the candidates to a chat
completion model and validates what comes back.  Every failure mode is
raised as a :class:`RankerError` subclass so the caller has exactly one
thing to catch before falling back:

* :class:`RankerUnavailable` – non-2xx status, network error or timeout.
* :class:`RankerOutputInvalid` – the reply has no parseable JSON array, or
  the array does not match the entry schema.

A single attempt is made per call; nothing is retried.
"""

import asyncio
import json
import logging

import openai
from pydantic import TypeAdapter, ValidationError

from ...config import Settings
from ...models import PlayerCandidate, RankedEntry, ReportCandidate
from .prompts import build_messages

logger = logging.getLogger(__name__)

# Prompt-size caps. Candidates beyond these are not shown to the model.
MAX_PROMPT_PLAYERS = 20
MAX_PROMPT_REPORTS = 10

_decoder = json.JSONDecoder()

_entries_adapter = TypeAdapter(list[RankedEntry])


class RankerError(Exception):
    """Base class for ranking failures that should trigger the fallback."""


class RankerUnavailable(RankerError):
    """The model could not be reached or answered with an error status."""


class RankerOutputInvalid(RankerError):
    """The model answered, but not with a JSON array of ranked entries."""


def _first_json_array(content: str) -> list:
    """Decode the JSON array that starts at the first ``[`` of *content*.

    Text before the array and anything after its closing bracket (including
    further bracketed prose) is ignored.
    """
    start = content.find("[")
    if start < 0:
        raise RankerOutputInvalid("No JSON array found in model response")
    try:
        raw, _ = _decoder.raw_decode(content, start)
    except json.JSONDecodeError as exc:
        raise RankerOutputInvalid(f"Model response is not valid JSON: {exc}") from exc
    return raw


def parse_ranked_entries(content: str | None) -> list[RankedEntry]:
    """Extract and validate the ranked-entry array embedded in *content*."""
    if not content:
        raise RankerOutputInvalid("Empty model response")

    raw = _first_json_array(content)

    try:
        return _entries_adapter.validate_python(raw)
    except ValidationError as exc:
        raise RankerOutputInvalid(
            f"Model response does not match the result schema: {exc.error_count()} error(s)"
        ) from exc


class RelevanceRanker:
    """Ranks candidates against a free-text query with a chat completion model.

    ``client`` is anything exposing an async ``chat.completions.create``
    compatible with ``openai.AsyncOpenAI``.
    """

    def __init__(
        self,
        client,
        model: str,
        temperature: float = 0.1,
        max_tokens: int = 1000,
        timeout: float = 12.0,
        max_players: int = MAX_PROMPT_PLAYERS,
        max_reports: int = MAX_PROMPT_REPORTS,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.max_players = max_players
        self.max_reports = max_reports

    @classmethod
    def from_settings(cls, settings: Settings) -> "RelevanceRanker | None":
        """Build a ranker with an ``AsyncOpenAI`` client.

        Returns ``None`` when no API key is configured.
        """
        if not settings.openai_api_key:
            return None
        client = openai.AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.ranker_timeout_seconds,
            max_retries=0,
        )
        return cls(
            client,
            model=settings.ranker_model,
            temperature=settings.ranker_temperature,
            max_tokens=settings.ranker_max_tokens,
            timeout=settings.ranker_timeout_seconds,
        )

    def truncate(
        self,
        players: list[PlayerCandidate],
        reports: list[ReportCandidate],
    ) -> tuple[list[PlayerCandidate], list[ReportCandidate]]:
        """Apply the prompt-size caps."""
        return players[: self.max_players], reports[: self.max_reports]

    async def complete(self, messages: list[dict]) -> str | None:
        """Run one chat completion and return the reply text."""
        try:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            raise RankerUnavailable(f"Model call timed out after {self.timeout}s") from exc
        except openai.APIStatusError as exc:
            raise RankerUnavailable(f"Model call failed with status {exc.status_code}") from exc
        except openai.APIError as exc:
            raise RankerUnavailable(f"Model call failed: {exc}") from exc

        try:
            return response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise RankerOutputInvalid("Model response has no message content") from exc

    async def rank(
        self,
        query: str,
        players: list[PlayerCandidate],
        reports: list[ReportCandidate],
        limit: int,
        search_type: str | None = None,
    ) -> list[RankedEntry]:
        """Return at most *limit* entries judged relevant to *query*.

        Callers pass the prompt-truncated lists (see :meth:`truncate`).
        Entries may reference ids the model invented; they are returned as-is.
        """
        messages = build_messages(query, players, reports, limit, search_type)
        content = await self.complete(messages)
        entries = parse_ranked_entries(content)
        logger.info("Model ranked %d of %d candidates", len(entries), len(players) + len(reports))
        return entries[:limit]
