"""Tenants router: tenant list, detail and onboarding screens."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from propdesk.schemas.property import Unit
from propdesk.schemas.tenant import (
    Tenant,
    TenantDetail,
    TenantForm,
    TenantFormOptions,
    TenantListItem,
    TenantListPage,
    TenantSubmission,
    TenantUnitSummary,
)
from propdesk.services import navigation
from propdesk.services.entity_filters import build_tenant_filter
from propdesk.services.formatting import get_contact_line, get_unit_display_name
from propdesk.services.listing import checked_criteria, empty_state, filter_state
from propdesk.services.repository import SampleRepository, get_repository
from propdesk.services.submissions import FormSubmissionService, get_submission_service
from propdesk.services.summaries import get_today, overdue_payment_count, tenant_summary
from propdesk.services.validation import FormValidationError

router = APIRouter(prefix="/tenants", tags=["tenants"])


def _unit_summary(unit: Optional[Unit], repository: SampleRepository) -> Optional[TenantUnitSummary]:
    if unit is None:
        return None
    prop = repository.get_property(unit.property_id)
    return TenantUnitSummary(
        id=unit.id,
        number=unit.number,
        display_name=get_unit_display_name(unit, prop),
        property_id=unit.property_id,
        property_name=prop.name if prop else None,
        rent=unit.rent,
    )


def _tenant_unit(tenant: Tenant, repository: SampleRepository) -> Optional[TenantUnitSummary]:
    return _unit_summary(repository.get_unit(tenant.current_unit_id), repository)


@router.get("", response_model=TenantListPage)
async def list_tenants(
    q: Optional[str] = Query(None, description="Matches name, email or phone"),
    status_filter: Optional[str] = Query(None, alias="status"),
    property_id: Optional[str] = Query(None, alias="property"),
    repository: SampleRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    """Tenants table screen with the summary cards above it."""
    tenant_filter = build_tenant_filter(repository)
    criteria = checked_criteria(tenant_filter, q, status=status_filter, property=property_id)
    matches = tenant_filter.apply(repository.tenants, criteria)

    items = [
        TenantListItem(
            id=t.id,
            name=t.name,
            email=t.email,
            phone=t.phone,
            is_active=t.is_active,
            status="active" if t.is_active else "inactive",
            move_in_date=t.move_in_date,
            unit=_tenant_unit(t, repository),
            overdue_payments=overdue_payment_count(repository, t.id),
            detail_url=navigation.resolve("tenant_detail", id=t.id),
        )
        for t in matches
    ]

    return TenantListPage(
        items=items,
        total=len(repository.tenants),
        shown=len(items),
        summary=tenant_summary(repository, today),
        filters=filter_state(criteria),
        options=tenant_filter.options(),
        empty_state=None if items else empty_state(
            tenant_filter, "tenants", navigation.resolve("tenants")
        ),
    )


@router.get("/form-options", response_model=TenantFormOptions)
async def tenant_form_options(
    repository: SampleRepository = Depends(get_repository),
):
    """Units a new tenant can be assigned to (available units only)."""
    return TenantFormOptions(
        units=[_unit_summary(u, repository) for u in repository.available_units()],
    )


@router.post("", response_model=TenantSubmission)
async def submit_tenant(
    form: TenantForm,
    repository: SampleRepository = Depends(get_repository),
    submissions: FormSubmissionService = Depends(get_submission_service),
):
    """Tenant onboarding form. The tenant is validated but never stored."""
    try:
        return await submissions.submit_tenant(form, repository)
    except FormValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.get("/{tenant_id}", response_model=TenantDetail)
async def get_tenant(
    tenant_id: str,
    repository: SampleRepository = Depends(get_repository),
):
    """Tenant detail screen."""
    tenant = repository.get_tenant(tenant_id)
    if not tenant:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tenant not found")

    return TenantDetail(
        record=tenant,
        contact_line=get_contact_line(tenant.email, tenant.phone),
        unit=_tenant_unit(tenant, repository),
        emergency_contact=tenant.emergency_contact,
        back_url=navigation.resolve("tenants"),
    )
