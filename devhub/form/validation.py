"""Checks a draft must pass before it is handed to the form controller."""

from __future__ import annotations

from typing import List

from pydantic import AnyUrl, TypeAdapter, ValidationError

from ..exceptions import FormValidationError
from ..resource.draft import Draft, PortfolioLinkDraft

_url_adapter = TypeAdapter(AnyUrl)


def missing_fields(draft: Draft) -> List[str]:
    missing: List[str] = []
    for name in draft.REQUIRED_FIELDS:
        value = getattr(draft, name)
        if isinstance(value, str) and not value.strip():
            missing.append(name)
    return missing


def is_valid_url(value: str) -> bool:
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def validate_draft(draft: Draft) -> None:
    missing = missing_fields(draft)
    if missing:
        raise FormValidationError(missing)

    if isinstance(draft, PortfolioLinkDraft) and not is_valid_url(draft.url):
        raise FormValidationError(["url"], f"Please enter a URL: {draft.url!r}")


__all__ = ["missing_fields", "is_valid_url", "validate_draft"]
