"""Service configuration.

Values are read from the environment once, at application start-up, and the
resulting ``Settings`` object is handed to the clients and pipeline stages
that need it. Nothing below the app factory reads ``os.environ`` directly.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

# How many rows of each entity kind are read per search request.
DEFAULT_CANDIDATE_FETCH_LIMIT = 50


class Settings(BaseSettings):
    """Each field is read from the upper-cased variable of the same name.

    Unset or empty variables fall back to the field defaults.
    """

    elasticsearch_url: str = "http://localhost:9200"
    elasticsearch_api_key: str | None = None
    players_index: str = "players"
    reports_index: str = "reports"
    candidate_fetch_limit: int = Field(DEFAULT_CANDIDATE_FETCH_LIMIT, ge=1)

    openai_api_key: str | None = None
    openai_base_url: str | None = None
    ranker_model: str = "gpt-4o-mini"
    ranker_temperature: float = Field(0.1, ge=0, le=2)
    ranker_max_tokens: int = Field(1000, ge=1)
    ranker_timeout_seconds: float = Field(12.0, gt=0)

    # JSON list in the environment, e.g. CORS_ALLOW_ORIGINS='["https://app.example"]'
    cors_allow_origins: list[str] = ["*"]

    model_config = {"env_ignore_empty": True, "extra": "ignore"}
