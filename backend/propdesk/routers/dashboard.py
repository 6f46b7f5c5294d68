"""Dashboard router - summary cards for the landing screen."""

from fastapi import APIRouter, Depends

from propdesk.models.enums import UnitStatus
from propdesk.schemas.navigation import DashboardStats
from propdesk.services.formatting import calculate_percentage
from propdesk.services.repository import SampleRepository, get_repository

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    repository: SampleRepository = Depends(get_repository),
):
    """Aggregate counts across the sample portfolio.

    Unit totals come from the property records, not the unit list, so a
    property whose units are not itemized still counts.
    """
    total_units = sum(p.total_units for p in repository.properties)
    occupied_units = sum(p.occupied_units for p in repository.properties)

    return DashboardStats(
        total_properties=len(repository.properties),
        total_units=total_units,
        occupied_units=occupied_units,
        available_units=sum(1 for u in repository.units if u.status == UnitStatus.AVAILABLE),
        occupancy_rate=calculate_percentage(occupied_units, total_units),
        active_tenants=sum(1 for t in repository.tenants if t.is_active),
        active_vendors=sum(1 for v in repository.vendors if v.is_active),
    )
