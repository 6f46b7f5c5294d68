"""
Form validation for the add screens.

Each validator checks its form top to bottom and raises
``FormValidationError`` with the first failing rule's message. Validation
runs before any simulated submission.
"""

import re
from typing import Collection, Optional

from propdesk.schemas.property import PropertyForm
from propdesk.schemas.tenant import TenantForm
from propdesk.schemas.vendor import VendorForm

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
ZIP_CODE_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")

NO_UNIT = "none"


class FormValidationError(ValueError):
    """A single human-readable message that blocks submission."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email))


def is_valid_zip_code(zip_code: str) -> bool:
    return bool(ZIP_CODE_PATTERN.fullmatch(zip_code))


def _blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def require(value: Optional[str], label: str) -> None:
    if _blank(value):
        raise FormValidationError(f"{label} is required")


def validate_property_form(form: PropertyForm) -> None:
    require(form.name, "Property name")
    require(form.street, "Street address")
    require(form.city, "City")
    require(form.state, "State")
    require(form.zip_code, "ZIP code")
    if form.type is None:
        raise FormValidationError("Property type is required")
    if not is_valid_zip_code(form.zip_code):
        raise FormValidationError("Please enter a valid ZIP code")
    if form.occupied_units > form.total_units:
        raise FormValidationError("Occupied units cannot exceed total units")


def validate_tenant_form(form: TenantForm, available_unit_ids: Collection[str]) -> None:
    """``available_unit_ids`` are the units a new tenant may be assigned to."""
    require(form.name, "Name")
    require(form.email, "Email")
    require(form.phone, "Phone")
    if not is_valid_email(form.email):
        raise FormValidationError("Please enter a valid email address")
    unit_id = form.current_unit_id
    if unit_id and unit_id != NO_UNIT and unit_id not in available_unit_ids:
        raise FormValidationError("Selected unit is not available")
    if not _blank(form.emergency_contact_name) and _blank(form.emergency_contact_phone):
        raise FormValidationError("Emergency contact phone is required")


def validate_vendor_form(form: VendorForm) -> float:
    """Validate and return the parsed rating."""
    if _blank(form.name) or _blank(form.email) or _blank(form.phone) or not form.specialties:
        raise FormValidationError(
            "Please fill in all required fields and select at least one specialty"
        )
    if not is_valid_email(form.email):
        raise FormValidationError("Please enter a valid email address")
    try:
        rating = float(form.rating)
    except ValueError:
        raise FormValidationError("Rating must be a number between 0 and 5")
    if not 0.0 <= rating <= 5.0:
        raise FormValidationError("Rating must be a number between 0 and 5")
    return rating
