"""
PropDesk - Screen Summaries

Read-only aggregates over leases, payments and maintenance tickets: the
summary cards above the tenants table and the work history on the vendor
detail screen. Records whose tenant, unit or property reference cannot be
resolved are left out (or shown without the unresolved name), never raised.
"""

import logging
from datetime import date

from propdesk.models.enums import (
    MAINTENANCE_STATUS_LABELS,
    LeaseStatus,
    MaintenanceStatus,
    PaymentStatus,
)
from propdesk.schemas.lease import TenantSummary
from propdesk.schemas.maintenance import (
    MaintenanceRequest,
    VendorRequestItem,
    VendorWorkSummary,
)
from propdesk.services.formatting import calculate_percentage, round_half_up
from propdesk.services.repository import SampleRepository

logger = logging.getLogger(__name__)

EXPIRY_WINDOW_DAYS = 30

ACTIVE_WORK = (MaintenanceStatus.ASSIGNED, MaintenanceStatus.IN_PROGRESS)


def get_today() -> date:
    """Reference date for expiry windows. Override in tests via ``app.dependency_overrides``."""
    return date.today()


def overdue_payment_count(repository: SampleRepository, tenant_id: str) -> int:
    return sum(
        1 for p in repository.payments_for_tenant(tenant_id)
        if p.status == PaymentStatus.OVERDUE
    )


def tenant_summary(repository: SampleRepository, today: date) -> TenantSummary:
    """Summary cards for the tenants screen.

    A lease is expiring when it ends within the next ``EXPIRY_WINDOW_DAYS``
    days (ending today does not count).
    """
    leases = [lease for lease in repository.leases if repository.get_tenant(lease.tenant_id)]

    def expiring(lease) -> bool:
        days_left = (lease.end_date - today).days
        return 0 < days_left <= EXPIRY_WINDOW_DAYS

    return TenantSummary(
        total_tenants=len(repository.tenants),
        active_tenants=sum(1 for t in repository.tenants if t.is_active),
        active_leases=sum(1 for lease in leases if lease.status == LeaseStatus.ACTIVE),
        leases_expiring=sum(1 for lease in leases if expiring(lease)),
        overdue_tenants=sum(
            1 for t in repository.tenants if overdue_payment_count(repository, t.id) > 0
        ),
    )


def _request_item(request: MaintenanceRequest, repository: SampleRepository) -> VendorRequestItem:
    prop = repository.get_property(request.property_id)
    unit = repository.get_unit(request.unit_id)
    return VendorRequestItem(
        id=request.id,
        title=request.title,
        category=request.category,
        priority=request.priority,
        status=request.status,
        status_label=MAINTENANCE_STATUS_LABELS[request.status],
        property_name=prop.name if prop else None,
        unit_number=unit.number if unit else None,
        estimated_cost=request.estimated_cost,
        actual_cost=request.actual_cost,
        completed_date=request.completed_date,
        created_at=request.created_at,
    )


def vendor_work_summary(repository: SampleRepository, vendor_id: str) -> VendorWorkSummary:
    """Tickets assigned to a vendor: active (assigned or in progress) and completed.

    Open and cancelled tickets count toward the completion rate only.
    """
    requests = repository.requests_for_vendor(vendor_id)
    active = [r for r in requests if r.status in ACTIVE_WORK]
    completed = [r for r in requests if r.status == MaintenanceStatus.COMPLETED]
    earnings = sum(r.actual_cost or 0 for r in completed)

    logger.debug(
        f"[WORK] vendor={vendor_id} total={len(requests)} "
        f"active={len(active)} completed={len(completed)}"
    )
    return VendorWorkSummary(
        total_requests=len(requests),
        active_requests=[_request_item(r, repository) for r in active],
        completed_requests=[_request_item(r, repository) for r in completed],
        completion_rate=calculate_percentage(len(completed), len(requests)),
        total_earnings=earnings,
        average_job_cost=int(round_half_up(earnings / len(completed))) if completed else 0,
    )
