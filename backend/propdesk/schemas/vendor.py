"""Vendor schemas."""

from typing import List, Optional, Tuple, Union

from pydantic import Field

from propdesk.schemas.base import (
    BaseSchema,
    IDMixin,
    ListPageBase,
    RecordSchema,
    SelectOption,
    SubmissionResult,
)
from propdesk.models.enums import VendorSpecialty
from propdesk.schemas.maintenance import VendorWorkSummary


class Vendor(RecordSchema, IDMixin):
    """Vendor record as held by the sample repository."""

    name: str
    email: str
    phone: str
    specialties: Tuple[VendorSpecialty, ...] = ()
    rating: float = Field(0.0, ge=0.0, le=5.0)
    total_jobs: int = Field(0, ge=0)
    is_active: bool = True
    address: Optional[str] = None
    license_number: Optional[str] = None
    insurance_info: Optional[str] = None


class VendorListItem(BaseSchema, IDMixin):
    """Card shown in the vendor directory."""

    name: str
    email: str
    phone: str
    specialties: List[SelectOption]
    rating: float
    total_jobs: int
    is_active: bool
    detail_url: str


class VendorListPage(ListPageBase):
    items: List[VendorListItem]


class VendorDetail(BaseSchema):
    """Vendor detail screen."""

    record: Vendor
    specialties: List[SelectOption]
    contact_line: str
    work: VendorWorkSummary
    back_url: str


class VendorForm(BaseSchema):
    """Vendor onboarding form."""

    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    specialties: List[VendorSpecialty] = []
    rating: Union[float, str] = "4.0"
    license_number: str = ""
    insurance_info: str = ""


class VendorSubmission(SubmissionResult):
    record: Vendor
