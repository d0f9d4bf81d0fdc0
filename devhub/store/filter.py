from __future__ import annotations

import logging
from enum import Enum

from ..resource.kinds import PUBLIC_SNIPPETS_PATH, SNIPPETS
from .state import StoreState
from .store import ResourceStore

logger = logging.getLogger("devhub")


class SnippetFilter(str, Enum):
    ALL = "all"
    PUBLIC = "public"


FILTER_TARGETS = {
    SnippetFilter.ALL: SNIPPETS.collection_path,
    SnippetFilter.PUBLIC: PUBLIC_SNIPPETS_PATH,
}


def target_for(value: SnippetFilter) -> str:
    return FILTER_TARGETS[value]


class FilterController:
    """Switch the snippet store between the full and the public-only collection."""

    def __init__(self, store: ResourceStore, *, initial: SnippetFilter = SnippetFilter.ALL) -> None:
        self.store = store
        self.current = initial

    @property
    def target(self) -> str:
        return target_for(self.current)

    async def select(self, value: SnippetFilter | str) -> StoreState:
        # raises ValueError for anything other than "all" / "public"
        self.current = SnippetFilter(value)
        logger.debug("[%s] filter set to %s", self.store.kind.name, self.current.value)
        return await self.store.load(self.target)


__all__ = ["SnippetFilter", "FilterController", "FILTER_TARGETS", "target_for"]
