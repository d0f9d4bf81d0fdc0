"""Async HTTP client for the DevHub list/create/delete endpoints."""

from __future__ import annotations

import logging
from typing import Any, List

import httpx

from ..exceptions import ResourceClientError, ServerError, TransportError
from .config import ClientConfig

logger = logging.getLogger("devhub")


class ResourceClient:
    """Issue requests against the API base URL and surface failures as exceptions.

    Every call is attempted once. Non-2xx answers raise ``ServerError``, requests
    that never complete raise ``TransportError``.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or ClientConfig.from_env()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=self.config.api_url,
            timeout=self.config.timeout_seconds,
        )

    async def __aenter__(self) -> "ResourceClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def list(self, path: str) -> List[Any]:
        response = await self._send("GET", path)
        try:
            payload = response.json()
        except ValueError as exc:
            raise ResourceClientError(f"Invalid JSON response from {path}") from exc
        if not isinstance(payload, list):
            raise ResourceClientError(f"Expected a list from {path}, got {type(payload).__name__}")
        return payload

    async def create(self, path: str, payload: dict[str, Any]) -> None:
        await self._send("POST", path, json=payload)

    async def delete(self, path: str) -> None:
        await self._send("DELETE", path)

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc
        if not response.is_success:
            logger.debug("%s %s -> %d", method, path, response.status_code)
            raise ServerError(response.status_code)
        return response


__all__ = ["ResourceClient"]
