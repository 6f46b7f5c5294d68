"""Maintenance schemas."""

from datetime import date
from typing import List, Optional

from pydantic import Field

from propdesk.schemas.base import BaseSchema, IDMixin, RecordSchema
from propdesk.models.enums import MaintenancePriority, MaintenanceStatus, VendorSpecialty


class MaintenanceRequest(RecordSchema, IDMixin):
    """Maintenance ticket as held by the sample repository."""

    unit_id: str
    property_id: str
    tenant_id: Optional[str] = None
    title: str
    description: str = ""
    category: VendorSpecialty = VendorSpecialty.OTHER
    priority: MaintenancePriority = MaintenancePriority.MEDIUM
    status: MaintenanceStatus = MaintenanceStatus.OPEN
    assigned_vendor_id: Optional[str] = None
    estimated_cost: Optional[float] = Field(None, ge=0)
    actual_cost: Optional[float] = Field(None, ge=0)
    scheduled_date: Optional[date] = None
    completed_date: Optional[date] = None
    created_at: date


class VendorRequestItem(BaseSchema, IDMixin):
    """Row of the work-history table on the vendor detail screen.

    ``property_name`` and ``unit_number`` are omitted when the ticket's
    property or unit cannot be resolved.
    """

    title: str
    category: VendorSpecialty
    priority: MaintenancePriority
    status: MaintenanceStatus
    status_label: str
    property_name: Optional[str] = None
    unit_number: Optional[str] = None
    estimated_cost: Optional[float] = None
    actual_cost: Optional[float] = None
    completed_date: Optional[date] = None
    created_at: date


class VendorWorkSummary(BaseSchema):
    """Assigned tickets of one vendor, split by lifecycle."""

    total_requests: int
    active_requests: List[VendorRequestItem]
    completed_requests: List[VendorRequestItem]
    completion_rate: float
    total_earnings: float
    average_job_cost: int
