"""Client-side controllers for the DevHub portfolio and snippet collections."""

from .client import ClientConfig, ResourceClient
from .exceptions import FormValidationError, ResourceClientError, ServerError, TransportError
from .manager import ResourceManager, create_portfolio_manager, create_snippet_manager
from .resource import CodeSnippet, PortfolioLink, PortfolioLinkDraft, SnippetDraft
from .store import SnippetFilter

__all__ = [
    "ClientConfig",
    "CodeSnippet",
    "FormValidationError",
    "PortfolioLink",
    "PortfolioLinkDraft",
    "ResourceClient",
    "ResourceClientError",
    "ResourceManager",
    "ServerError",
    "SnippetDraft",
    "SnippetFilter",
    "TransportError",
    "create_portfolio_manager",
    "create_snippet_manager",
]
