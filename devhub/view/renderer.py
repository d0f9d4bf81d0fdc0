"""Projection of store state into display rows, plus guarded row deletion."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import tzinfo
from typing import Awaitable, Callable, List, Tuple

from ..form.state import FormState
from ..resource.kinds import ResourceKind
from ..resource.model import CodeSnippet, PortfolioLink, ResourceModel, Timestamp
from ..store.state import StoreState
from ..store.store import ResourceStore

logger = logging.getLogger("devhub")

MISSING_TIMESTAMP = "N/A"

Confirm = Callable[[str], Awaitable[bool]]


@dataclass(frozen=True, slots=True)
class RowView:
    """Display fields for one record."""

    record_id: str | None
    title: str
    details: Tuple[str, ...] = ()
    body: str | None = None
    footer: str | None = None


@dataclass(frozen=True, slots=True)
class ListView:
    heading: str
    toggle_label: str
    rows: Tuple[RowView, ...] = ()
    loading_message: str | None = None
    error: str | None = None
    placeholder: str | None = None


def format_timestamp(timestamp: Timestamp | None, tz: tzinfo | None = None) -> str:
    if timestamp is None:
        return MISSING_TIMESTAMP
    moment = timestamp.to_datetime(tz)
    return f"{moment:%x} {moment:%X}"


def portfolio_row(link: PortfolioLink) -> RowView:
    details: List[str] = []
    if link.category:
        details.append(link.category)
    details.append(link.url)
    if link.description:
        details.append(link.description)
    return RowView(
        record_id=link.id,
        title=link.title,
        details=tuple(details),
        footer=f"Order: {link.order}",
    )


def snippet_row(snippet: CodeSnippet, tz: tzinfo | None = None) -> RowView:
    details: List[str] = [f"Language: {snippet.language}"]
    if snippet.category:
        details.append(f"Category: {snippet.category}")
    if snippet.is_public:
        details.append("Public")
    if snippet.tags:
        details.append(f"Tags: {', '.join(snippet.tags)}")
    if snippet.description:
        details.append(snippet.description)
    if snippet.author:
        details.append(f"Author: {snippet.author}")

    footer = f"Created: {format_timestamp(snippet.created_at, tz)}"
    if snippet.updated_at is not None:
        footer += f" | Updated: {format_timestamp(snippet.updated_at, tz)}"

    return RowView(
        record_id=snippet.id,
        title=snippet.title,
        details=tuple(details),
        body=snippet.code,
        footer=footer,
    )


def record_row(record: ResourceModel, tz: tzinfo | None = None) -> RowView:
    if isinstance(record, CodeSnippet):
        return snippet_row(record, tz)
    if isinstance(record, PortfolioLink):
        return portfolio_row(record)
    raise TypeError(f"No row layout for {type(record).__name__}")


def render_list(
    kind: ResourceKind,
    state: StoreState,
    form: FormState | None = None,
    *,
    tz: tzinfo | None = None,
) -> ListView:
    """Build the view for ``state``; rows keep the order the server returned."""

    toggle_label = "Cancel" if form is not None and form.visible else kind.add_label
    if state.loading:
        return ListView(
            heading=kind.heading,
            toggle_label=toggle_label,
            loading_message=kind.loading_message,
            error=state.error,
        )

    rows = tuple(record_row(record, tz) for record in state.records)
    return ListView(
        heading=kind.heading,
        toggle_label=toggle_label,
        rows=rows,
        error=state.error,
        placeholder=None if rows else kind.empty_message,
    )


class ListRenderer:
    """Render a store's collection and route row deletes through a confirmation."""

    def __init__(self, store: ResourceStore, *, tz: tzinfo | None = None) -> None:
        self.store = store
        self.tz = tz

    def render(self, form: FormState | None = None) -> ListView:
        return render_list(self.store.kind, self.store.state, form, tz=self.tz)

    async def request_delete(self, record_id: str, confirm: Confirm) -> bool:
        if not await confirm(self.store.kind.confirm_delete_prompt):
            logger.debug("[%s] delete of %s declined", self.store.kind.name, record_id)
            return False
        return await self.store.remove(record_id)


__all__ = [
    "Confirm",
    "ListRenderer",
    "ListView",
    "MISSING_TIMESTAMP",
    "RowView",
    "format_timestamp",
    "portfolio_row",
    "record_row",
    "render_list",
    "snippet_row",
]
