from datetime import date

from propdesk.services.repository import SampleRepository
from propdesk.services.summaries import (
    overdue_payment_count,
    tenant_summary,
    vendor_work_summary,
)

TODAY = date(2026, 10, 1)

TENANT = {"id": "t1", "name": "Ann Lee", "email": "ann@example.com", "phone": "555"}


def _lease(lease_id, tenant_id, end_date, status="active"):
    return {
        "id": lease_id,
        "tenant_id": tenant_id,
        "unit_id": "u1",
        "property_id": "p1",
        "start_date": "2025-01-01",
        "end_date": end_date,
        "status": status,
    }


def test_expiry_window_boundaries():
    repository = SampleRepository.from_records(
        tenants=[TENANT],
        leases=[
            _lease("ends-today", "t1", "2026-10-01"),
            _lease("ends-in-30", "t1", "2026-10-31"),
            _lease("ends-in-31", "t1", "2026-11-01"),
            _lease("ended", "t1", "2026-09-30", status="expired"),
        ],
    )
    summary = tenant_summary(repository, TODAY)
    assert summary.leases_expiring == 1
    assert summary.active_leases == 3


def test_leases_and_payments_of_unknown_tenants_are_not_counted():
    repository = SampleRepository.from_records(
        tenants=[TENANT],
        leases=[_lease("orphan", "ghost", "2026-10-10")],
        payments=[
            {"id": "pay", "tenant_id": "ghost", "amount": 10, "due_date": "2026-09-01", "status": "overdue"},
        ],
    )
    summary = tenant_summary(repository, TODAY)
    assert summary.active_leases == 0
    assert summary.leases_expiring == 0
    assert summary.overdue_tenants == 0


def test_overdue_payment_count_ignores_other_statuses(repository):
    assert overdue_payment_count(repository, "tenant-2") == 2
    assert overdue_payment_count(repository, "tenant-3") == 0
    assert overdue_payment_count(repository, "tenant-404") == 0


def test_tickets_of_removed_vendor_are_not_shown(repository):
    for vendor in repository.vendors:
        work = vendor_work_summary(repository, vendor.id)
        ids = [r.id for r in work.active_requests + work.completed_requests]
        assert "request-7" not in ids


def test_open_and_cancelled_tickets_only_count_toward_completion_rate(repository):
    cleaning = vendor_work_summary(repository, "vendor-5")
    assert cleaning.total_requests == 1
    assert cleaning.active_requests == []
    assert cleaning.completed_requests == []
    assert cleaning.completion_rate == 0.0


def test_average_job_cost_rounds_halves_up():
    repository = SampleRepository.from_records(
        maintenance_requests=[
            {
                "id": f"r{i}",
                "unit_id": "u1",
                "property_id": "p1",
                "title": "Job",
                "status": "completed",
                "assigned_vendor_id": "v1",
                "actual_cost": cost,
                "created_at": "2026-01-01",
            }
            for i, cost in enumerate([100, 101])
        ],
    )
    work = vendor_work_summary(repository, "v1")
    assert work.total_earnings == 201
    assert work.average_job_cost == 101
    assert work.completed_requests[0].property_name is None
