"""Static description of the resource types managed by the console."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Type
from urllib.parse import quote

from .draft import Draft, PortfolioLinkDraft, SnippetDraft
from .model import CodeSnippet, PortfolioLink, ResourceModel


@dataclass(frozen=True, slots=True)
class ResourceKind:
    """Endpoints, models and user-facing texts for one resource type."""

    name: str
    collection_path: str
    record_model: Type[ResourceModel]
    draft_model: Type[Draft]
    heading: str
    loading_message: str
    add_label: str
    empty_message: str
    confirm_delete_prompt: str
    # completes "Failed to <operation>: <detail>"
    fetch_operation: str
    create_operation: str
    delete_operation: str

    def item_path(self, record_id: str) -> str:
        return f"{self.collection_path}/{quote(record_id, safe='')}"


PORTFOLIO = ResourceKind(
    name="portfolio",
    collection_path="/portfolio",
    record_model=PortfolioLink,
    draft_model=PortfolioLinkDraft,
    heading="Portfolio Links",
    loading_message="Loading portfolio...",
    add_label="Add New Link",
    empty_message='No portfolio links yet. Click "Add New Link" to get started!',
    confirm_delete_prompt="Are you sure you want to delete this link?",
    fetch_operation="fetch portfolio links",
    create_operation="create portfolio link",
    delete_operation="delete link",
)

SNIPPETS = ResourceKind(
    name="snippets",
    collection_path="/snippets",
    record_model=CodeSnippet,
    draft_model=SnippetDraft,
    heading="Code Snippets",
    loading_message="Loading snippets...",
    add_label="Add New Snippet",
    empty_message='No snippets found. Click "Add New Snippet" to get started!',
    confirm_delete_prompt="Are you sure you want to delete this snippet?",
    fetch_operation="fetch snippets",
    create_operation="create snippet",
    delete_operation="delete snippet",
)

PUBLIC_SNIPPETS_PATH = "/snippets/public"


__all__ = ["ResourceKind", "PORTFOLIO", "SNIPPETS", "PUBLIC_SNIPPETS_PATH"]
