import json
from typing import Any

import pytest
from fastapi import FastAPI, Request, Response
from fastapi.testclient import TestClient

ENDPOINT = "http://localhost:8080/graphql"

VEGGIE_PIZZA_BODY = {
    "data": {
        "recommend": [
            {
                "id": 1,
                "name": "Veggie Pizza",
                "calories": 650,
                "vegan": False,
                "vegetarian": True,
                "popularityScore": 0.8,
                "score": 0.91,
            }
        ]
    }
}


class FakeGraphQLServer:
    """FastAPI app answering every POST /graphql with a canned response."""

    def __init__(self, body: Any, status_code: int = 200) -> None:
        self.body = body if isinstance(body, (str, bytes)) else json.dumps(body)
        self.status_code = status_code
        self.requests: list[dict[str, Any]] = []

        self.app = FastAPI()
        self.app.add_api_route("/graphql", self._handle, methods=["POST"])
        self.client = TestClient(self.app)

    async def _handle(self, request: Request) -> Response:
        self.requests.append({
            "url": str(request.url),
            "content_type": request.headers.get("content-type"),
            "json": await request.json(),
        })
        return Response(content=self.body, status_code=self.status_code, media_type="application/json")

    @property
    def last_json(self) -> dict[str, Any]:
        return self.requests[-1]["json"]


@pytest.fixture
def graphql_server():
    servers: list[FakeGraphQLServer] = []

    def _make(body: Any = VEGGIE_PIZZA_BODY, status_code: int = 200) -> FakeGraphQLServer:
        server = FakeGraphQLServer(body, status_code)
        servers.append(server)
        return server

    yield _make

    for server in servers:
        server.client.close()
