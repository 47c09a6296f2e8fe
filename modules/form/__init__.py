"""Form module for the mentorship application."""

from .dto import ApplicationDraft, FormState
from .normalization import mask_phone, only_digits
from .service import Notification, SubmissionService
from .validators import is_form_valid, validate_form

__all__ = [
    "ApplicationDraft",
    "FormState",
    "Notification",
    "SubmissionService",
    "is_form_valid",
    "mask_phone",
    "only_digits",
    "validate_form",
]
