"""Lease and payment schemas."""

from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from propdesk.schemas.base import BaseSchema, IDMixin, RecordSchema
from propdesk.models.enums import LeaseStatus, PaymentStatus, PaymentType


class Lease(RecordSchema, IDMixin):
    """Lease record as held by the sample repository."""

    tenant_id: str
    unit_id: str
    property_id: str
    start_date: date
    end_date: date
    rent: float = Field(0, ge=0)
    deposit: float = Field(0, ge=0)
    status: LeaseStatus = LeaseStatus.PENDING

    @model_validator(mode="after")
    def end_after_start(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot precede start_date")
        return self


class Payment(RecordSchema, IDMixin):
    """Tenant payment record."""

    tenant_id: str
    lease_id: Optional[str] = None
    amount: float = Field(..., ge=0)
    type: PaymentType = PaymentType.RENT
    due_date: date
    paid_date: Optional[date] = None
    status: PaymentStatus = PaymentStatus.PENDING


class TenantSummary(BaseSchema):
    """Summary cards above the tenants table.

    Leases and payments whose tenant cannot be resolved are not counted.
    """

    total_tenants: int
    active_tenants: int
    active_leases: int
    leases_expiring: int
    overdue_tenants: int
