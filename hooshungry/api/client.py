from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .config import DEFAULT_CLIENT_CONFIG, ClientConfig
from .errors import (
    GraphQLResponseError,
    HTTPStatusError,
    MalformedResponseError,
    TransportError,
)

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class GraphQLClient:
    """Synchronous GraphQL-over-HTTP client for a single endpoint."""

    def __init__(
        self,
        config: ClientConfig = DEFAULT_CLIENT_CONFIG,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.endpoint = config.endpoint
        self._owns_session = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=config.timeout)
        self.session = http_client

    def __enter__(self) -> GraphQLClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        POST one GraphQL document and return its `data` object.

        Raises a GraphQLClientError subclass for every failure; a response
        carrying a top-level `errors` key is a failure even when `data` is set.
        """
        body = json.dumps({"query": query, "variables": variables or {}})
        logger.debug("POST %s (%d bytes)", self.endpoint, len(body))

        try:
            resp = self.session.post(self.endpoint, content=body, headers=JSON_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc

        if resp.status_code != 200:
            logger.debug("HTTP %s from %s", resp.status_code, self.endpoint)
            raise HTTPStatusError(resp.status_code, resp.text)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise MalformedResponseError(f"response body is not valid JSON ({exc})") from exc

        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"expected a JSON object, got {type(payload).__name__}"
            )

        if "errors" in payload:
            raise GraphQLResponseError(payload["errors"])

        data = payload.get("data")
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise MalformedResponseError(f"`data` must be an object, got {type(data).__name__}")
        return data
