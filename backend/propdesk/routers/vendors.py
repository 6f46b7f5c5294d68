"""Vendors router: directory, detail and onboarding screens."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from propdesk.models.enums import VENDOR_SPECIALTY_LABELS
from propdesk.schemas.base import SelectOption
from propdesk.schemas.vendor import (
    Vendor,
    VendorDetail,
    VendorForm,
    VendorListItem,
    VendorListPage,
    VendorSubmission,
)
from propdesk.services import navigation
from propdesk.services.entity_filters import VENDOR_FILTER
from propdesk.services.formatting import get_contact_line
from propdesk.services.listing import checked_criteria, empty_state, filter_state
from propdesk.services.repository import SampleRepository, get_repository
from propdesk.services.submissions import FormSubmissionService, get_submission_service
from propdesk.services.summaries import vendor_work_summary
from propdesk.services.validation import FormValidationError

router = APIRouter(prefix="/vendors", tags=["vendors"])


def _specialty_options(vendor: Vendor) -> List[SelectOption]:
    return [
        SelectOption(value=s.value, label=VENDOR_SPECIALTY_LABELS[s])
        for s in vendor.specialties
    ]


@router.get("", response_model=VendorListPage)
async def list_vendors(
    q: Optional[str] = Query(None, description="Matches name, email or phone"),
    specialty: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    repository: SampleRepository = Depends(get_repository),
):
    """Vendor directory screen. ``specialty`` matches any of a vendor's specialties."""
    criteria = checked_criteria(VENDOR_FILTER, q, specialty=specialty, status=status_filter)
    matches = VENDOR_FILTER.apply(repository.vendors, criteria)

    items = [
        VendorListItem(
            id=v.id,
            name=v.name,
            email=v.email,
            phone=v.phone,
            specialties=_specialty_options(v),
            rating=v.rating,
            total_jobs=v.total_jobs,
            is_active=v.is_active,
            detail_url=navigation.resolve("vendor_detail", id=v.id),
        )
        for v in matches
    ]

    return VendorListPage(
        items=items,
        total=len(repository.vendors),
        shown=len(items),
        filters=filter_state(criteria),
        options=VENDOR_FILTER.options(),
        empty_state=None if items else empty_state(
            VENDOR_FILTER, "vendors", navigation.resolve("vendors")
        ),
    )


@router.post("", response_model=VendorSubmission)
async def submit_vendor(
    form: VendorForm,
    submissions: FormSubmissionService = Depends(get_submission_service),
):
    """Vendor onboarding form. The vendor is validated but never stored."""
    try:
        return await submissions.submit_vendor(form)
    except FormValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.get("/{vendor_id}", response_model=VendorDetail)
async def get_vendor(
    vendor_id: str,
    repository: SampleRepository = Depends(get_repository),
):
    """Vendor detail screen with the vendor's assigned work."""
    vendor = repository.get_vendor(vendor_id)
    if not vendor:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vendor not found")

    return VendorDetail(
        record=vendor,
        specialties=_specialty_options(vendor),
        contact_line=get_contact_line(vendor.email, vendor.phone),
        work=vendor_work_summary(repository, vendor.id),
        back_url=navigation.resolve("vendors"),
    )
