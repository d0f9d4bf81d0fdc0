"""Per-resource bundles of store, form, renderer and (for snippets) filter."""

from __future__ import annotations

from datetime import tzinfo

from .form.controller import DraftFormController
from .resource.kinds import PORTFOLIO, SNIPPETS, ResourceKind
from .store.filter import FilterController, SnippetFilter, target_for
from .store.state import StoreState
from .store.store import RemoteCollection, ResourceStore
from .view.renderer import ListRenderer, ListView


class ResourceManager:
    """Everything one resource view needs, wired to a single store."""

    def __init__(
        self,
        kind: ResourceKind,
        client: RemoteCollection,
        *,
        with_filter: bool = False,
        initial_filter: SnippetFilter = SnippetFilter.ALL,
        tz: tzinfo | None = None,
    ) -> None:
        target = target_for(initial_filter) if with_filter else None
        self.kind = kind
        self.store = ResourceStore(kind, client, target=target)
        self.form = DraftFormController(self.store)
        self.renderer = ListRenderer(self.store, tz=tz)
        self.filter = (
            FilterController(self.store, initial=initial_filter) if with_filter else None
        )

    async def open(self) -> StoreState:
        """Fetch the collection for the active target, as a freshly shown view does."""
        return await self.store.load()

    def view(self) -> ListView:
        return self.renderer.render(self.form.state)


def create_portfolio_manager(client: RemoteCollection, *, tz: tzinfo | None = None) -> ResourceManager:
    return ResourceManager(PORTFOLIO, client, tz=tz)


def create_snippet_manager(
    client: RemoteCollection,
    *,
    initial_filter: SnippetFilter = SnippetFilter.ALL,
    tz: tzinfo | None = None,
) -> ResourceManager:
    return ResourceManager(
        SNIPPETS,
        client,
        with_filter=True,
        initial_filter=initial_filter,
        tz=tz,
    )


__all__ = ["ResourceManager", "create_portfolio_manager", "create_snippet_manager"]
