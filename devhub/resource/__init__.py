"""Resource records, drafts and kind descriptions."""

from .draft import Draft, PortfolioLinkDraft, SnippetDraft, parse_tags
from .kinds import PORTFOLIO, PUBLIC_SNIPPETS_PATH, SNIPPETS, ResourceKind
from .model import CodeSnippet, PortfolioLink, ResourceModel, Timestamp

__all__ = [
    "CodeSnippet",
    "Draft",
    "PORTFOLIO",
    "PUBLIC_SNIPPETS_PATH",
    "PortfolioLink",
    "PortfolioLinkDraft",
    "ResourceKind",
    "ResourceModel",
    "SNIPPETS",
    "SnippetDraft",
    "Timestamp",
    "parse_tags",
]
