"""In-process fake of the DevHub REST API used by the end-to-end tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Any, Dict, List

import httpx
import pytest
import pytest_asyncio
from fastapi import APIRouter, FastAPI, HTTPException, Response, status
from fastapi.responses import PlainTextResponse

from devhub.client import ClientConfig, ResourceClient

FAKE_BASE_URL = "http://devhub.test/api"


@dataclass
class FakeBackend:
    """Mutable server-side state shared by the fake routes."""

    portfolio: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    snippets: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    requests: List[tuple[str, str]] = field(default_factory=list)
    fail_paths: set[tuple[str, str]] = field(default_factory=set)
    _ids: Any = field(default_factory=lambda: count(1))
    _clock: Any = field(default_factory=lambda: count(1_700_000_000, 60))

    def next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids)}"

    def check(self, method: str, path: str) -> None:
        self.requests.append((method, path))
        if (method, path) in self.fail_paths:
            raise HTTPException(status_code=500)

    def add_snippet(self, **fields: Any) -> str:
        snippet_id = self.next_id("snippet")
        self.snippets[snippet_id] = {
            "id": snippet_id,
            "tags": [],
            "isPublic": False,
            "createdAt": {"seconds": next(self._clock), "nanos": 0},
            **fields,
        }
        return snippet_id

    def add_link(self, **fields: Any) -> str:
        link_id = self.next_id("link")
        self.portfolio[link_id] = {"id": link_id, "order": 0, **fields}
        return link_id


def create_fake_api(backend: FakeBackend) -> FastAPI:
    router = APIRouter(prefix="/api")

    def _snippets_newest_first(items) -> List[Dict[str, Any]]:
        return sorted(items, key=lambda item: item["createdAt"]["seconds"], reverse=True)

    @router.get("/portfolio")
    async def list_links() -> List[Dict[str, Any]]:
        backend.check("GET", "/api/portfolio")
        return sorted(backend.portfolio.values(), key=lambda item: item["order"])

    @router.post("/portfolio", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
    async def create_link(payload: Dict[str, Any]) -> str:
        backend.check("POST", "/api/portfolio")
        payload.pop("id", None)
        return backend.add_link(**payload)

    @router.delete("/portfolio/{link_id}", response_class=Response)
    async def delete_link(link_id: str) -> Response:
        backend.check("DELETE", f"/api/portfolio/{link_id}")
        backend.portfolio.pop(link_id, None)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get("/snippets")
    async def list_snippets() -> List[Dict[str, Any]]:
        backend.check("GET", "/api/snippets")
        return _snippets_newest_first(backend.snippets.values())

    @router.get("/snippets/public")
    async def list_public_snippets() -> List[Dict[str, Any]]:
        backend.check("GET", "/api/snippets/public")
        return _snippets_newest_first(s for s in backend.snippets.values() if s.get("isPublic"))

    @router.post("/snippets", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
    async def create_snippet(payload: Dict[str, Any]) -> str:
        backend.check("POST", "/api/snippets")
        payload.pop("id", None)
        return backend.add_snippet(**payload)

    @router.delete("/snippets/{snippet_id}", response_class=Response)
    async def delete_snippet(snippet_id: str) -> Response:
        backend.check("DELETE", f"/api/snippets/{snippet_id}")
        backend.snippets.pop(snippet_id, None)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    app = FastAPI(title="Fake DevHub API")
    app.include_router(router)
    return app


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest_asyncio.fixture
async def api_client(backend: FakeBackend):
    transport = httpx.ASGITransport(app=create_fake_api(backend))
    http_client = httpx.AsyncClient(transport=transport, base_url=FAKE_BASE_URL)
    client = ResourceClient(ClientConfig(api_url=FAKE_BASE_URL), http_client=http_client)
    try:
        yield client
    finally:
        await http_client.aclose()
