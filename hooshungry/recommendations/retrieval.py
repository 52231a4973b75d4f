from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..api.client import GraphQLClient
from ..api.errors import MalformedResponseError
from .models import (
    DEFAULT_LIMIT,
    DEFAULT_PREFERENCES,
    DiningHall,
    PreferenceInput,
    RecommendationRequest,
    RecommendedItem,
)
from .queries import DINING_HALLS_QUERY, RECOMMEND_QUERY

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def build_variables(
    hall_id: int,
    prefs: PreferenceInput = DEFAULT_PREFERENCES,
    limit: int = DEFAULT_LIMIT,
) -> RecommendationRequest:
    return RecommendationRequest(hall_id=hall_id, limit=limit, prefs=prefs)


def _parse_list(data: dict[str, Any], field: str, model: type[_ModelT]) -> list[_ModelT]:
    """Validate `data[field]` as a list of `model`; null or missing means empty."""
    raw = data.get(field)
    if raw is None:
        logger.debug("`%s` missing from response data, treating as empty", field)
        return []
    if not isinstance(raw, list):
        raise MalformedResponseError(f"`data.{field}` must be a list, got {type(raw).__name__}")

    try:
        return [model.model_validate(entry) for entry in raw]
    except ValidationError as exc:
        raise MalformedResponseError(f"invalid `{field}` entry: {exc}") from exc


def fetch_recommendations(
    client: GraphQLClient,
    hall_id: int,
    prefs: PreferenceInput = DEFAULT_PREFERENCES,
    limit: int = DEFAULT_LIMIT,
) -> list[RecommendedItem]:
    variables = build_variables(hall_id, prefs=prefs, limit=limit)
    data = client.execute(RECOMMEND_QUERY, variables.to_variables())
    items = _parse_list(data, "recommend", RecommendedItem)
    logger.info("Received %d recommendations for hall_id=%s", len(items), hall_id)
    return items


def fetch_dining_halls(client: GraphQLClient, query: str | None = None) -> list[DiningHall]:
    data = client.execute(DINING_HALLS_QUERY, {"query": query})
    return _parse_list(data, "diningHalls", DiningHall)
