"""API Routers for PropDesk."""

from propdesk.routers.properties import router as properties_router
from propdesk.routers.tenants import router as tenants_router
from propdesk.routers.vendors import router as vendors_router
from propdesk.routers.navigation import router as navigation_router
from propdesk.routers.dashboard import router as dashboard_router

__all__ = [
    "properties_router",
    "tenants_router",
    "vendors_router",
    "navigation_router",
    "dashboard_router",
]
