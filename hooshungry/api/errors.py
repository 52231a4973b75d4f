from __future__ import annotations

from typing import Any


class GraphQLClientError(Exception):
    """Base class for every failure of a GraphQL round trip."""


class TransportError(GraphQLClientError):
    """The request never produced an HTTP response (refused, timed out, ...)."""


class HTTPStatusError(GraphQLClientError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class MalformedResponseError(GraphQLClientError):
    """The response body is not a usable GraphQL envelope."""


class GraphQLResponseError(GraphQLClientError):
    def __init__(self, errors: Any) -> None:
        super().__init__("GraphQL response contained errors")
        self.errors = errors
