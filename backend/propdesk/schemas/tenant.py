"""Tenant schemas."""

from datetime import date
from typing import List, Optional

from propdesk.schemas.base import (
    BaseSchema,
    IDMixin,
    ListPageBase,
    RecordSchema,
    SubmissionResult,
)
from propdesk.schemas.lease import TenantSummary


class EmergencyContact(RecordSchema):
    name: str
    phone: str
    relationship: str = ""


class Tenant(RecordSchema, IDMixin):
    """Tenant record as held by the sample repository."""

    name: str
    email: str
    phone: str
    is_active: bool = True
    current_unit_id: Optional[str] = None
    move_in_date: Optional[date] = None
    date_of_birth: Optional[date] = None
    emergency_contact: Optional[EmergencyContact] = None


class TenantUnitSummary(BaseSchema, IDMixin):
    """Unit section of tenant screens."""

    number: str
    display_name: str
    property_id: str
    property_name: Optional[str] = None
    rent: float


class TenantListItem(BaseSchema, IDMixin):
    """Row of the tenants table."""

    name: str
    email: str
    phone: str
    is_active: bool
    status: str
    move_in_date: Optional[date] = None
    unit: Optional[TenantUnitSummary] = None
    overdue_payments: int = 0
    detail_url: str


class TenantListPage(ListPageBase):
    items: List[TenantListItem]
    summary: TenantSummary


class TenantDetail(BaseSchema):
    """Tenant detail screen.

    ``unit`` and ``emergency_contact`` are omitted when absent or when the
    unit reference cannot be resolved.
    """

    record: Tenant
    contact_line: str
    unit: Optional[TenantUnitSummary] = None
    emergency_contact: Optional[EmergencyContact] = None
    back_url: str


class TenantForm(BaseSchema):
    """Tenant onboarding form.

    ``current_unit_id`` of ``"none"`` or empty means no unit assignment.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    date_of_birth: Optional[date] = None
    is_active: bool = True
    move_in_date: Optional[date] = None
    current_unit_id: str = ""
    emergency_contact_name: str = ""
    emergency_contact_phone: str = ""
    emergency_contact_relationship: str = ""


class TenantFormOptions(BaseSchema):
    """Select options for the onboarding screen: only available units."""

    units: List[TenantUnitSummary]


class TenantSubmission(SubmissionResult):
    record: Tenant
