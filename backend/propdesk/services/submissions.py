"""
PropDesk - Form Submission Service

Boundary behind the add screens. A submission is validated, held for the
configured simulated latency, and answered with the record that *would* have
been created. Nothing is written to the repository.
"""

import asyncio
import logging
from uuid import uuid4

from fastapi import Depends

from propdesk.core.config import Settings, get_settings
from propdesk.models.enums import VendorSpecialty
from propdesk.schemas.property import Address, Property, PropertyForm, PropertySubmission
from propdesk.schemas.tenant import EmergencyContact, Tenant, TenantForm, TenantSubmission
from propdesk.schemas.vendor import Vendor, VendorForm, VendorSubmission
from propdesk.services import navigation
from propdesk.services.repository import SampleRepository
from propdesk.services.validation import (
    NO_UNIT,
    FormValidationError,
    validate_property_form,
    validate_tenant_form,
    validate_vendor_form,
)

logger = logging.getLogger(__name__)


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:12]}"


def _split_list(value: str):
    return tuple(item.strip() for item in value.split(",") if item.strip())


class FormSubmissionService:
    """Validates add-form candidates and simulates their submission."""

    def __init__(self, delay_seconds: float = 0.0):
        self.delay_seconds = delay_seconds

    async def _simulate_latency(self) -> None:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

    async def submit_property(self, form: PropertyForm) -> PropertySubmission:
        try:
            validate_property_form(form)
        except FormValidationError as e:
            logger.info(f"[FORMS] Property rejected: {e.message}")
            raise

        await self._simulate_latency()

        record = Property(
            id=_new_id("property"),
            name=form.name,
            description=form.description,
            address=Address(
                street=form.street,
                city=form.city,
                state=form.state,
                zip_code=form.zip_code,
                country=form.country or "USA",
            ),
            type=form.type,
            status=form.status,
            total_units=form.total_units,
            occupied_units=form.occupied_units,
            images=tuple(form.images),
            amenities=_split_list(form.amenities),
            year_built=form.year_built,
        )
        logger.info(f"[FORMS] Property submitted (not persisted): {record.id} {record.name}")
        return PropertySubmission(
            message="Your property has been successfully submitted for review.",
            redirect_url=navigation.resolve("properties"),
            record=record,
        )

    async def submit_tenant(self, form: TenantForm, repository: SampleRepository) -> TenantSubmission:
        available = {unit.id for unit in repository.available_units()}
        try:
            validate_tenant_form(form, available)
        except FormValidationError as e:
            logger.info(f"[FORMS] Tenant rejected: {e.message}")
            raise

        await self._simulate_latency()

        emergency_contact = None
        if form.emergency_contact_name:
            emergency_contact = EmergencyContact(
                name=form.emergency_contact_name,
                phone=form.emergency_contact_phone,
                relationship=form.emergency_contact_relationship,
            )

        unit_id = form.current_unit_id
        record = Tenant(
            id=_new_id("tenant"),
            name=form.name,
            email=form.email,
            phone=form.phone,
            is_active=form.is_active,
            current_unit_id=None if unit_id in ("", NO_UNIT) else unit_id,
            move_in_date=form.move_in_date,
            date_of_birth=form.date_of_birth,
            emergency_contact=emergency_contact,
        )
        logger.info(f"[FORMS] Tenant submitted (not persisted): {record.id} {record.name}")
        return TenantSubmission(
            message="The tenant has been successfully added to the system.",
            redirect_url=navigation.resolve("tenants"),
            record=record,
        )

    async def submit_vendor(self, form: VendorForm) -> VendorSubmission:
        try:
            rating = validate_vendor_form(form)
        except FormValidationError as e:
            logger.info(f"[FORMS] Vendor rejected: {e.message}")
            raise

        await self._simulate_latency()

        # Keep selection order, drop repeated toggles
        specialties = tuple(dict.fromkeys(VendorSpecialty(s) for s in form.specialties))
        record = Vendor(
            id=_new_id("vendor"),
            name=form.name,
            email=form.email,
            phone=form.phone,
            specialties=specialties,
            rating=rating,
            total_jobs=0,
            is_active=True,
            address=form.address or None,
            license_number=form.license_number or None,
            insurance_info=form.insurance_info or None,
        )
        logger.info(f"[FORMS] Vendor submitted (not persisted): {record.id} {record.name}")
        return VendorSubmission(
            message="Vendor created successfully.",
            redirect_url=navigation.resolve("vendors"),
            record=record,
        )


def get_submission_service(settings: Settings = Depends(get_settings)) -> FormSubmissionService:
    """Submission service dependency configured from settings."""
    return FormSubmissionService(delay_seconds=settings.submit_delay_seconds)
