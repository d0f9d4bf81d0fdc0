"""In-memory collection store mediating between views and the remote API."""

from __future__ import annotations

import logging
from itertools import count
from typing import Any, List, Protocol

from pydantic import TypeAdapter, ValidationError

from ..exceptions import ResourceClientError
from ..resource.kinds import ResourceKind
from ..resource.model import ResourceModel
from .state import (
    LoadFailed,
    LoadStarted,
    LoadSucceeded,
    MutationFailed,
    StoreEvent,
    StoreState,
    reduce,
)

logger = logging.getLogger("devhub")


class RemoteCollection(Protocol):
    async def list(self, path: str) -> List[Any]: ...

    async def create(self, path: str, payload: dict[str, Any]) -> None: ...

    async def delete(self, path: str) -> None: ...


class ResourceStore:
    """Hold the collection for one resource kind and keep it in sync with the server.

    The collection only ever changes to the body of a successful list response;
    create and remove reload it instead of patching it locally.
    """

    def __init__(
        self,
        kind: ResourceKind,
        client: RemoteCollection,
        *,
        target: str | None = None,
    ) -> None:
        self.kind = kind
        self.client = client
        self.state = StoreState(target=target or kind.collection_path)
        self._request_ids = count(1)
        self._records_adapter = TypeAdapter(List[kind.record_model])

    @property
    def records(self) -> tuple[ResourceModel, ...]:
        return self.state.records

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def error(self) -> str | None:
        return self.state.error

    def dispatch(self, event: StoreEvent) -> StoreState:
        self.state = reduce(self.state, event)
        return self.state

    async def load(self, target: str | None = None) -> StoreState:
        request_id = next(self._request_ids)
        target = target or self.state.target
        self.dispatch(LoadStarted(request_id, target))

        try:
            payload = await self.client.list(target)
            records = self._records_adapter.validate_python(payload)
        except (ResourceClientError, ValidationError) as exc:
            message = self._failure(self.kind.fetch_operation, exc)
            outcome: StoreEvent = LoadFailed(request_id, message)
        else:
            outcome = LoadSucceeded(request_id, records)

        if request_id != self.state.latest_request:
            logger.debug(
                "[%s] discarding response for request %d (latest is %d)",
                self.kind.name,
                request_id,
                self.state.latest_request,
            )
        return self.dispatch(outcome)

    async def create(self, record: ResourceModel) -> bool:
        try:
            await self.client.create(self.kind.collection_path, record.to_payload())
        except ResourceClientError as exc:
            self.dispatch(MutationFailed(self._failure(self.kind.create_operation, exc)))
            return False
        logger.info("[%s] created %r", self.kind.name, getattr(record, "title", None))
        await self.load()
        return True

    async def remove(self, record_id: str) -> bool:
        try:
            await self.client.delete(self.kind.item_path(record_id))
        except ResourceClientError as exc:
            self.dispatch(MutationFailed(self._failure(self.kind.delete_operation, exc)))
            return False
        logger.info("[%s] deleted %s", self.kind.name, record_id)
        await self.load()
        return True

    def _failure(self, operation: str, exc: Exception) -> str:
        detail = exc.detail if isinstance(exc, ResourceClientError) else str(exc)
        message = f"Failed to {operation}: {detail}"
        logger.warning("[%s] %s", self.kind.name, message)
        return message


__all__ = ["RemoteCollection", "ResourceStore"]
