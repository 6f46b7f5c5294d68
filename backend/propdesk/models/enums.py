"""Enumeration types for the PropDesk domain model."""

from enum import Enum


class PropertyType(str, Enum):
    """Type of property."""
    APARTMENT = "apartment"
    HOUSE = "house"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    COMMERCIAL = "commercial"


class PropertyStatus(str, Enum):
    """Operational status of a property."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"
    DEVELOPMENT = "development"


class UnitStatus(str, Enum):
    """Status of a unit."""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    UNDER_MAINTENANCE = "under_maintenance"
    RESERVED = "reserved"


class VendorSpecialty(str, Enum):
    """Maintenance category a vendor can be dispatched for."""
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    HVAC = "hvac"
    APPLIANCE = "appliance"
    STRUCTURAL = "structural"
    PEST_CONTROL = "pest_control"
    CLEANING = "cleaning"
    OTHER = "other"


class LeaseStatus(str, Enum):
    """Status of a lease."""
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"
    PENDING = "pending"


class PaymentStatus(str, Enum):
    """Status of a tenant payment."""
    PENDING = "pending"
    PAID = "paid"
    LATE = "late"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class PaymentType(str, Enum):
    RENT = "rent"
    DEPOSIT = "deposit"
    LATE_FEE = "late_fee"
    MAINTENANCE = "maintenance"
    UTILITY = "utility"
    OTHER = "other"


class MaintenancePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EMERGENCY = "emergency"


class MaintenanceStatus(str, Enum):
    """Lifecycle of a maintenance request."""
    OPEN = "open"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class UserRole(str, Enum):
    """Role of a signed-in user; drives the navigation shell."""
    ADMIN = "admin"
    PROPERTY_MANAGER = "property_manager"
    LANDLORD = "landlord"
    TENANT = "tenant"
    VENDOR = "vendor"


class ActiveStatus(str, Enum):
    """Select values for filtering on an is_active flag."""
    ACTIVE = "active"
    INACTIVE = "inactive"


PROPERTY_TYPE_LABELS = {
    PropertyType.APARTMENT: "Apartment",
    PropertyType.HOUSE: "House",
    PropertyType.CONDO: "Condo",
    PropertyType.TOWNHOUSE: "Townhouse",
    PropertyType.COMMERCIAL: "Commercial",
}

PROPERTY_STATUS_LABELS = {
    PropertyStatus.ACTIVE: "Active",
    PropertyStatus.INACTIVE: "Inactive",
    PropertyStatus.MAINTENANCE: "Maintenance",
    PropertyStatus.DEVELOPMENT: "Development",
}

VENDOR_SPECIALTY_LABELS = {
    VendorSpecialty.PLUMBING: "Plumbing",
    VendorSpecialty.ELECTRICAL: "Electrical",
    VendorSpecialty.HVAC: "HVAC",
    VendorSpecialty.APPLIANCE: "Appliance",
    VendorSpecialty.STRUCTURAL: "Structural",
    VendorSpecialty.PEST_CONTROL: "Pest Control",
    VendorSpecialty.CLEANING: "Cleaning",
    VendorSpecialty.OTHER: "Other",
}

ACTIVE_STATUS_LABELS = {
    ActiveStatus.ACTIVE: "Active",
    ActiveStatus.INACTIVE: "Inactive",
}

MAINTENANCE_STATUS_LABELS = {
    MaintenanceStatus.OPEN: "Open",
    MaintenanceStatus.ASSIGNED: "Assigned",
    MaintenanceStatus.IN_PROGRESS: "In Progress",
    MaintenanceStatus.COMPLETED: "Completed",
    MaintenanceStatus.CANCELLED: "Cancelled",
}
