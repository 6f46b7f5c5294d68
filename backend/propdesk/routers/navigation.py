"""Navigation router: menu shell and destination resolution."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from propdesk.models.enums import UserRole
from propdesk.schemas.navigation import NavigationShell, ResolvedDestination
from propdesk.services import navigation

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("", response_model=NavigationShell)
async def get_navigation(
    role: Optional[UserRole] = None,
    path: str = Query("/", description="Current screen path"),
):
    """Menu items for ``role``; anonymous visitors get Home and Properties."""
    return navigation.build_navigation(role, path)


@router.get("/resolve", response_model=ResolvedDestination)
async def resolve_destination(
    destination: str,
    id: Optional[str] = None,
):
    """Screen path for a logical destination such as ``property_detail``."""
    params = {"id": id} if id is not None else {}
    try:
        path = navigation.resolve(destination, **params)
    except navigation.UnknownDestinationError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown destination '{destination}'",
        )
    except KeyError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Missing parameter {e.args[0]} for destination '{destination}'",
        )
    return ResolvedDestination(destination=destination, path=path)
