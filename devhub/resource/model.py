from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, ClassVar, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ResourceModel(BaseModel):
    """Base for records exchanged with the DevHub API (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # assigned by the server, never sent on create
    SERVER_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"id"})

    id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(
            by_alias=True,
            exclude=set(self.SERVER_FIELDS),
            exclude_none=True,
        )


class Timestamp(BaseModel):
    """Firestore timestamp as serialized by the API."""

    model_config = ConfigDict(extra="ignore")

    seconds: int
    nanos: int = 0

    def to_datetime(self, tz: tzinfo | None = None) -> datetime:
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        instant = epoch + timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)
        return instant.astimezone(tz)


class PortfolioLink(ResourceModel):
    """Link to an external profile or project (GitHub, LinkedIn, blog...)."""

    title: str
    url: str
    order: int = 0
    category: str | None = None
    icon: str | None = None
    description: str | None = None


class CodeSnippet(ResourceModel):
    """Stored code snippet with its display metadata."""

    SERVER_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"id", "created_at", "updated_at"})

    title: str
    code: str
    language: str
    tags: List[str] = Field(default_factory=list)
    category: str | None = None
    is_public: bool = False
    description: str | None = None
    author: str | None = None
    gcs_file_url: str | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("is_public", mode="before")
    @classmethod
    def _null_is_public(cls, value: Any) -> Any:
        return False if value is None else value


__all__ = ["ResourceModel", "Timestamp", "PortfolioLink", "CodeSnippet"]
