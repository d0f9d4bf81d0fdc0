"""Uncommitted form drafts and their conversion into records."""

from __future__ import annotations

from typing import ClassVar, List, Tuple

from pydantic import BaseModel, ConfigDict

from .model import CodeSnippet, PortfolioLink, ResourceModel


def parse_tags(raw: str) -> List[str]:
    """Split comma-separated tag input, trimming segments and dropping empty ones."""

    return [tag.strip() for tag in raw.split(",") if tag.strip()]


class Draft(BaseModel):
    """Client-held record being edited before creation."""

    model_config = ConfigDict(extra="forbid")

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("title",)

    def to_record(self) -> ResourceModel:
        raise NotImplementedError


class PortfolioLinkDraft(Draft):
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("title", "url")

    title: str = ""
    url: str = ""
    order: int = 0
    category: str = ""
    icon: str = ""
    description: str = ""

    def to_record(self) -> PortfolioLink:
        return PortfolioLink(
            title=self.title,
            url=self.url,
            order=self.order,
            category=self.category,
            icon=self.icon,
            description=self.description,
        )


class SnippetDraft(Draft):
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("title", "code", "language")

    title: str = ""
    code: str = ""
    language: str = ""
    tags: str = ""
    category: str = ""
    is_public: bool = False
    description: str = ""

    def to_record(self) -> CodeSnippet:
        return CodeSnippet(
            title=self.title,
            code=self.code,
            language=self.language,
            tags=parse_tags(self.tags),
            category=self.category,
            is_public=self.is_public,
            description=self.description,
        )


__all__ = ["Draft", "PortfolioLinkDraft", "SnippetDraft", "parse_tags"]
