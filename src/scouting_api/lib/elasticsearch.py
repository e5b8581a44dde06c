"""Shared Elasticsearch utilities.

Helpers for working with Elasticsearch clients and responses that are used
across the candidate sources and the application lifespan.
"""

import logging

from elastic_transport import ObjectApiResponse
from elasticsearch import AsyncElasticsearch

from ..config import Settings

logger = logging.getLogger(__name__)


def create_es_client(settings: Settings) -> AsyncElasticsearch:
    """Build the application-scoped async client from *settings*."""
    return AsyncElasticsearch(
        settings.elasticsearch_url,
        api_key=settings.elasticsearch_api_key,
    )


def unwrap_es_response(resp) -> dict:
    """Unwrap an Elasticsearch response, handling both ObjectApiResponse and dict.

    Raises ``TypeError`` if the response type is unexpected.
    """
    if isinstance(resp, ObjectApiResponse):
        return resp.body
    elif isinstance(resp, dict):
        return resp
    else:
        logger.error("Unexpected Elasticsearch response type: %s", type(resp))
        raise TypeError(f"Unexpected Elasticsearch response type: {type(resp)}")


def iter_hit_sources(data: dict):
    """Yield ``(doc_id, source)`` for every hit in a search response body.

    The document ``_id`` is the entity id; an ``id`` field in the source is
    only used when the hit carries no ``_id``.
    """
    for hit in data.get("hits", {}).get("hits", []):
        src = hit.get("_source") or {}
        yield hit.get("_id") or src.get("id"), src
