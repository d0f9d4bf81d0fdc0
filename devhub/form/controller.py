from __future__ import annotations

import logging
from typing import Any

from ..store.store import ResourceStore
from .state import (
    FormState,
    edit_field,
    submit_failed,
    submit_succeeded,
    toggle_visibility,
)

logger = logging.getLogger("devhub")


class DraftFormController:
    """Own the creation draft of one resource kind and submit it through the store.

    Required-field checks happen before ``submit`` is called (see
    ``devhub.form.validation``); the controller sends whatever the draft holds.
    """

    def __init__(self, store: ResourceStore) -> None:
        self.store = store
        self.state = FormState.empty(store.kind.draft_model)

    @property
    def draft(self):
        return self.state.draft

    @property
    def visible(self) -> bool:
        return self.state.visible

    def update(self, name: str, value: Any) -> FormState:
        self.state = edit_field(self.state, name, value)
        return self.state

    def toggle(self) -> FormState:
        self.state = toggle_visibility(self.state)
        return self.state

    async def submit(self) -> bool:
        record = self.state.draft.to_record()
        created = await self.store.create(record)
        if created:
            self.state = submit_succeeded(self.state)
        else:
            logger.debug("[%s] keeping draft after failed create", self.store.kind.name)
            self.state = submit_failed(self.state)
        return created


__all__ = ["DraftFormController"]
