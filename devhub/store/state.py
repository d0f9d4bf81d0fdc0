"""Collection state for one resource type and its pure transitions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence, Tuple, Union

from ..resource.model import ResourceModel


@dataclass(frozen=True, slots=True)
class StoreState:
    """Snapshot of the collection as last accepted from the server."""

    target: str
    records: Tuple[ResourceModel, ...] = ()
    loading: bool = False
    error: str | None = None
    latest_request: int = 0


@dataclass(frozen=True, slots=True)
class LoadStarted:
    request_id: int
    target: str


@dataclass(frozen=True, slots=True)
class LoadSucceeded:
    request_id: int
    records: Sequence[ResourceModel]


@dataclass(frozen=True, slots=True)
class LoadFailed:
    request_id: int
    message: str


@dataclass(frozen=True, slots=True)
class MutationFailed:
    message: str


StoreEvent = Union[LoadStarted, LoadSucceeded, LoadFailed, MutationFailed]


def is_stale(state: StoreState, request_id: int) -> bool:
    return request_id != state.latest_request


def reduce(state: StoreState, event: StoreEvent) -> StoreState:
    """Apply ``event`` to ``state``.

    Load outcomes for anything but the most recently issued request leave the
    state untouched. Failures never modify ``records``.
    """

    if isinstance(event, LoadStarted):
        return replace(state, target=event.target, loading=True, latest_request=event.request_id)
    if isinstance(event, LoadSucceeded):
        if is_stale(state, event.request_id):
            return state
        return replace(state, records=tuple(event.records), loading=False, error=None)
    if isinstance(event, LoadFailed):
        if is_stale(state, event.request_id):
            return state
        return replace(state, loading=False, error=event.message)
    if isinstance(event, MutationFailed):
        return replace(state, error=event.message)
    raise TypeError(f"Unsupported store event: {event!r}")


__all__ = [
    "StoreState",
    "StoreEvent",
    "LoadStarted",
    "LoadSucceeded",
    "LoadFailed",
    "MutationFailed",
    "is_stale",
    "reduce",
]
