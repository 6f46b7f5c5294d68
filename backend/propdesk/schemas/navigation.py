"""Navigation shell and dashboard schemas."""

from typing import List, Optional

from pydantic import BaseModel

from propdesk.models.enums import UserRole


class NavItem(BaseModel):
    href: str
    label: str
    icon: str
    active: bool = False


class NavigationShell(BaseModel):
    """Menu for the current role with the item for ``path`` marked active."""

    role: Optional[UserRole] = None
    path: str
    items: List[NavItem]


class ResolvedDestination(BaseModel):
    destination: str
    path: str


class DashboardStats(BaseModel):
    total_properties: int
    total_units: int
    occupied_units: int
    available_units: int
    occupancy_rate: float
    active_tenants: int
    active_vendors: int
