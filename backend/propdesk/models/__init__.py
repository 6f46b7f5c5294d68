"""Domain enumerations for PropDesk.

Records themselves are pydantic schemas (see ``propdesk.schemas``); nothing
here is persisted.
"""

from propdesk.models.enums import (
    ActiveStatus,
    LeaseStatus,
    MaintenancePriority,
    MaintenanceStatus,
    PaymentStatus,
    PaymentType,
    PropertyStatus,
    PropertyType,
    UnitStatus,
    UserRole,
    VendorSpecialty,
)

__all__ = [
    "ActiveStatus",
    "LeaseStatus",
    "MaintenancePriority",
    "MaintenanceStatus",
    "PaymentStatus",
    "PaymentType",
    "PropertyStatus",
    "PropertyType",
    "UnitStatus",
    "UserRole",
    "VendorSpecialty",
]
