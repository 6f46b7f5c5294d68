"""Property and Unit schemas."""

from typing import List, Optional, Tuple

from pydantic import Field, model_validator

from propdesk.schemas.base import (
    BaseSchema,
    IDMixin,
    ListPageBase,
    RecordSchema,
    SubmissionResult,
)
from propdesk.models.enums import PropertyStatus, PropertyType, UnitStatus


class Address(RecordSchema):
    """Postal address of a property."""

    street: str
    city: str
    state: str
    zip_code: str
    country: str = "USA"


class Coordinates(RecordSchema):
    lat: float
    lng: float


class Property(RecordSchema, IDMixin):
    """Property record as held by the sample repository."""

    name: str
    description: str = ""
    address: Address
    coordinates: Optional[Coordinates] = None
    type: PropertyType
    status: PropertyStatus = PropertyStatus.ACTIVE
    total_units: int = Field(0, ge=0)
    occupied_units: int = Field(0, ge=0)
    images: Tuple[str, ...] = ()
    amenities: Tuple[str, ...] = ()
    property_manager_id: Optional[str] = None
    year_built: Optional[int] = Field(None, ge=1800, le=2100)

    @model_validator(mode="after")
    def validate_occupancy(self):
        """Occupied units can never exceed total units."""
        if self.occupied_units > self.total_units:
            raise ValueError("occupied_units cannot exceed total_units")
        return self


class Unit(RecordSchema, IDMixin):
    """Unit within a property."""

    property_id: str
    number: str
    bedrooms: int = Field(0, ge=0)
    bathrooms: float = Field(0, ge=0)
    area: int = Field(0, ge=0)  # sq ft
    rent: float = Field(0, ge=0)
    status: UnitStatus = UnitStatus.AVAILABLE
    current_tenant_id: Optional[str] = None


class ManagerSummary(BaseSchema, IDMixin):
    """Property manager section of the detail screen."""

    name: str
    email: str
    phone: Optional[str] = None


class PropertyListItem(BaseSchema, IDMixin):
    """Card shown on the property search screen."""

    name: str
    city: str
    state: str
    address_line: str
    type: PropertyType
    status: PropertyStatus
    total_units: int
    occupied_units: int
    occupancy_rate: int
    image: str
    detail_url: str


class PropertyListPage(ListPageBase):
    items: List[PropertyListItem]


class PropertyDetail(BaseSchema):
    """Property detail screen.

    ``manager`` is omitted when the referenced user cannot be resolved.
    """

    record: Property
    address_line: str
    full_address: str
    occupancy_rate: int
    units: List[Unit]
    manager: Optional[ManagerSummary] = None
    back_url: str


class PropertyForm(BaseSchema):
    """Add-property form as typed by the user.

    Text fields default to empty so presence checks produce a single
    human-readable message instead of a schema error.
    """

    name: str = ""
    description: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = "USA"
    type: Optional[PropertyType] = None
    status: PropertyStatus = PropertyStatus.ACTIVE
    total_units: int = Field(0, ge=0)
    occupied_units: int = Field(0, ge=0)
    year_built: Optional[int] = Field(None, ge=1800, le=2100)
    amenities: str = ""  # comma separated
    images: List[str] = []


class PropertySubmission(SubmissionResult):
    record: Property
