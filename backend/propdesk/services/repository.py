"""
PropDesk - Sample Repository

Read-only provider of the entity collections every screen renders.
Collections are loaded once from the static sample data, validated into
frozen records, and exposed as tuples. Add-form submissions never write
back here.
"""

import logging
from functools import lru_cache
from typing import Iterable, Mapping, Optional, Tuple

from propdesk.data import sample_data
from propdesk.models.enums import UnitStatus
from propdesk.schemas.lease import Lease, Payment
from propdesk.schemas.maintenance import MaintenanceRequest
from propdesk.schemas.property import Property, Unit
from propdesk.schemas.tenant import Tenant
from propdesk.schemas.user import User
from propdesk.schemas.vendor import Vendor

logger = logging.getLogger(__name__)


class SampleRepository:
    """In-memory, read-only collections behind every screen."""

    def __init__(
        self,
        properties: Iterable[Property] = (),
        units: Iterable[Unit] = (),
        tenants: Iterable[Tenant] = (),
        vendors: Iterable[Vendor] = (),
        users: Iterable[User] = (),
        leases: Iterable[Lease] = (),
        payments: Iterable[Payment] = (),
        maintenance_requests: Iterable[MaintenanceRequest] = (),
    ):
        self._properties: Tuple[Property, ...] = tuple(properties)
        self._units: Tuple[Unit, ...] = tuple(units)
        self._tenants: Tuple[Tenant, ...] = tuple(tenants)
        self._vendors: Tuple[Vendor, ...] = tuple(vendors)
        self._users: Tuple[User, ...] = tuple(users)
        self._leases: Tuple[Lease, ...] = tuple(leases)
        self._payments: Tuple[Payment, ...] = tuple(payments)
        self._maintenance_requests: Tuple[MaintenanceRequest, ...] = tuple(maintenance_requests)

    @classmethod
    def from_records(
        cls,
        properties: Iterable[Mapping] = (),
        units: Iterable[Mapping] = (),
        tenants: Iterable[Mapping] = (),
        vendors: Iterable[Mapping] = (),
        users: Iterable[Mapping] = (),
        leases: Iterable[Mapping] = (),
        payments: Iterable[Mapping] = (),
        maintenance_requests: Iterable[Mapping] = (),
    ) -> "SampleRepository":
        """Validate raw dictionaries into records."""
        return cls(
            properties=[Property.model_validate(p) for p in properties],
            units=[Unit.model_validate(u) for u in units],
            tenants=[Tenant.model_validate(t) for t in tenants],
            vendors=[Vendor.model_validate(v) for v in vendors],
            users=[User.model_validate(u) for u in users],
            leases=[Lease.model_validate(lease) for lease in leases],
            payments=[Payment.model_validate(p) for p in payments],
            maintenance_requests=[MaintenanceRequest.model_validate(m) for m in maintenance_requests],
        )

    @classmethod
    def from_sample_data(cls) -> "SampleRepository":
        repository = cls.from_records(
            properties=sample_data.PROPERTIES,
            units=sample_data.UNITS,
            tenants=sample_data.TENANTS,
            vendors=sample_data.VENDORS,
            users=sample_data.USERS,
            leases=sample_data.LEASES,
            payments=sample_data.PAYMENTS,
            maintenance_requests=sample_data.MAINTENANCE_REQUESTS,
        )
        logger.info(
            f"[REPO] Loaded {len(repository.properties)} properties, "
            f"{len(repository.tenants)} tenants, {len(repository.vendors)} vendors, "
            f"{len(repository.leases)} leases, {len(repository.maintenance_requests)} maintenance requests"
        )
        return repository

    # --- Collections ---

    @property
    def properties(self) -> Tuple[Property, ...]:
        return self._properties

    @property
    def units(self) -> Tuple[Unit, ...]:
        return self._units

    @property
    def tenants(self) -> Tuple[Tenant, ...]:
        return self._tenants

    @property
    def vendors(self) -> Tuple[Vendor, ...]:
        return self._vendors

    @property
    def users(self) -> Tuple[User, ...]:
        return self._users

    @property
    def leases(self) -> Tuple[Lease, ...]:
        return self._leases

    @property
    def payments(self) -> Tuple[Payment, ...]:
        return self._payments

    @property
    def maintenance_requests(self) -> Tuple[MaintenanceRequest, ...]:
        return self._maintenance_requests

    # --- Lookups (None when the reference cannot be resolved) ---

    def get_property(self, property_id: Optional[str]) -> Optional[Property]:
        return next((p for p in self._properties if p.id == property_id), None)

    def get_unit(self, unit_id: Optional[str]) -> Optional[Unit]:
        return next((u for u in self._units if u.id == unit_id), None)

    def get_tenant(self, tenant_id: Optional[str]) -> Optional[Tenant]:
        return next((t for t in self._tenants if t.id == tenant_id), None)

    def get_vendor(self, vendor_id: Optional[str]) -> Optional[Vendor]:
        return next((v for v in self._vendors if v.id == vendor_id), None)

    def get_user(self, user_id: Optional[str]) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def units_for_property(self, property_id: str) -> Tuple[Unit, ...]:
        return tuple(u for u in self._units if u.property_id == property_id)

    def available_units(self) -> Tuple[Unit, ...]:
        return tuple(u for u in self._units if u.status == UnitStatus.AVAILABLE)

    def property_for_unit(self, unit_id: Optional[str]) -> Optional[Property]:
        unit = self.get_unit(unit_id)
        return self.get_property(unit.property_id) if unit else None

    def payments_for_tenant(self, tenant_id: str) -> Tuple[Payment, ...]:
        return tuple(p for p in self._payments if p.tenant_id == tenant_id)

    def requests_for_vendor(self, vendor_id: str) -> Tuple[MaintenanceRequest, ...]:
        return tuple(m for m in self._maintenance_requests if m.assigned_vendor_id == vendor_id)


@lru_cache
def get_repository() -> SampleRepository:
    """Repository dependency. Override in tests via ``app.dependency_overrides``."""
    return SampleRepository.from_sample_data()
