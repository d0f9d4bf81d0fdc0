from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Type

from ..resource.draft import Draft


@dataclass(frozen=True, slots=True)
class FormState:
    """Creation form: the draft being edited and whether the form is shown."""

    draft: Draft
    visible: bool = False

    @classmethod
    def empty(cls, draft_model: Type[Draft]) -> "FormState":
        return cls(draft=draft_model())


def edit_field(state: FormState, name: str, value: Any) -> FormState:
    """Replace a single draft field, keeping every other field as it was."""

    draft_model = type(state.draft)
    if name not in draft_model.model_fields:
        raise KeyError(f"{draft_model.__name__} has no field {name!r}")
    values = state.draft.model_dump()
    values[name] = value
    return replace(state, draft=draft_model.model_validate(values))


def toggle_visibility(state: FormState) -> FormState:
    return replace(state, visible=not state.visible)


def submit_succeeded(state: FormState) -> FormState:
    return FormState(draft=type(state.draft)(), visible=False)


def submit_failed(state: FormState) -> FormState:
    # draft kept so the user can retry
    return state


__all__ = [
    "FormState",
    "edit_field",
    "toggle_visibility",
    "submit_succeeded",
    "submit_failed",
]
