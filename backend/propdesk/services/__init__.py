"""Services for PropDesk."""

from propdesk.services.filtering import (
    ALL,
    CategoricalField,
    EntityFilter,
    FilterCriteria,
    TextField,
    UnknownFilterValue,
)
from propdesk.services.repository import SampleRepository, get_repository
from propdesk.services.submissions import FormSubmissionService, get_submission_service
from propdesk.services.validation import FormValidationError

__all__ = [
    "ALL",
    "CategoricalField",
    "EntityFilter",
    "FilterCriteria",
    "TextField",
    "UnknownFilterValue",
    "SampleRepository",
    "get_repository",
    "FormSubmissionService",
    "get_submission_service",
    "FormValidationError",
]
