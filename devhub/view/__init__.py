"""List rendering for resource collections."""

from .renderer import (
    ListRenderer,
    ListView,
    RowView,
    format_timestamp,
    render_list,
)
from .text import format_list_view

__all__ = [
    "ListRenderer",
    "ListView",
    "RowView",
    "format_list_view",
    "format_timestamp",
    "render_list",
]
