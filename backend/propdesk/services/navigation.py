"""
Navigation shell and routing surface.

Maps logical destinations (e.g. property detail by id) to screen paths and
builds the role-specific menu with the current screen highlighted.
"""

import logging
from typing import Dict, List, Optional, Tuple

from propdesk.models.enums import UserRole
from propdesk.schemas.navigation import NavigationShell, NavItem

logger = logging.getLogger(__name__)

# (href, label, icon)
_MenuEntry = Tuple[str, str, str]

ANONYMOUS_ITEMS: List[_MenuEntry] = [
    ("/", "Home", "Home"),
    ("/properties", "Properties", "Building"),
]

NAVIGATION_ITEMS: Dict[UserRole, List[_MenuEntry]] = {
    UserRole.ADMIN: [
        ("/dashboard", "Dashboard", "Home"),
        ("/properties", "Properties", "Building"),
        ("/tenants", "Tenants", "Users"),
        ("/leases", "Leases", "FileText"),
        ("/payments", "Payments", "CreditCard"),
        ("/maintenance", "Maintenance", "Wrench"),
        ("/vendors", "Vendors", "Truck"),
        ("/reports", "Reports", "BarChart"),
        ("/messages", "Messages", "MessageSquare"),
        ("/settings", "Settings", "Settings"),
    ],
    UserRole.PROPERTY_MANAGER: [
        ("/dashboard", "Dashboard", "Home"),
        ("/properties", "Properties", "Building"),
        ("/tenants", "Tenants", "Users"),
        ("/leases", "Leases", "FileText"),
        ("/payments", "Payments", "CreditCard"),
        ("/maintenance", "Maintenance", "Wrench"),
        ("/vendors", "Vendors", "Truck"),
        ("/reports", "Reports", "BarChart"),
        ("/messages", "Messages", "MessageSquare"),
    ],
    UserRole.LANDLORD: [
        ("/dashboard", "Dashboard", "Home"),
        ("/properties", "Properties", "Building"),
        ("/tenants", "Tenants", "Users"),
        ("/leases", "Leases", "FileText"),
        ("/payments", "Payments", "CreditCard"),
        ("/reports", "Reports", "BarChart"),
    ],
    UserRole.TENANT: [
        ("/dashboard", "Dashboard", "Home"),
        ("/my-lease", "My Lease", "FileText"),
        ("/my-payments", "My Payments", "CreditCard"),
        ("/maintenance", "Maintenance", "Wrench"),
        ("/messages", "Messages", "MessageSquare"),
    ],
    UserRole.VENDOR: [
        ("/dashboard", "Dashboard", "Home"),
        ("/assignments", "Assignments", "Wrench"),
        ("/messages", "Messages", "MessageSquare"),
    ],
}

DESTINATIONS: Dict[str, str] = {
    "home": "/",
    "dashboard": "/dashboard",
    "properties": "/properties",
    "property_detail": "/property/{id}",
    "property_add": "/add-property",
    "tenants": "/tenants",
    "tenant_detail": "/tenants/{id}",
    "tenant_add": "/tenants/add",
    "vendors": "/vendors",
    "vendor_detail": "/vendors/{id}",
    "vendor_add": "/vendors/add",
}


class UnknownDestinationError(LookupError):
    """Destination name is not routable."""


def resolve(destination: str, **params: str) -> str:
    """Path for a logical destination.

    Raises:
        UnknownDestinationError: destination is not known
        KeyError: a path parameter is missing
    """
    template = DESTINATIONS.get(destination)
    if template is None:
        raise UnknownDestinationError(destination)
    return template.format(**params)


def is_active(href: str, path: str) -> bool:
    """An item is highlighted only on its own screen, not on screens below it."""
    return path == href


def build_navigation(role: Optional[UserRole], path: str = "/") -> NavigationShell:
    entries = ANONYMOUS_ITEMS if role is None else NAVIGATION_ITEMS.get(role, [])
    items = [
        NavItem(href=href, label=label, icon=icon, active=is_active(href, path))
        for href, label, icon in entries
    ]
    logger.debug(f"[NAV] {len(items)} item(s) for role={role} path={path}")
    return NavigationShell(role=role, path=path, items=items)
