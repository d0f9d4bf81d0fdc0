"""Collection state, its store and the snippet filter."""

from .filter import FilterController, SnippetFilter, target_for
from .state import StoreState, reduce
from .store import RemoteCollection, ResourceStore

__all__ = [
    "FilterController",
    "RemoteCollection",
    "ResourceStore",
    "SnippetFilter",
    "StoreState",
    "reduce",
    "target_for",
]
