"""Draft form state, controller and pre-submit validation."""

from .controller import DraftFormController
from .state import FormState
from .validation import validate_draft

__all__ = ["DraftFormController", "FormState", "validate_draft"]
