"""Properties router: search, detail and add-property screens."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from propdesk.schemas.property import (
    ManagerSummary,
    PropertyDetail,
    PropertyForm,
    PropertyListItem,
    PropertyListPage,
    PropertySubmission,
)
from propdesk.services import navigation
from propdesk.services.entity_filters import PROPERTY_FILTER
from propdesk.services.formatting import (
    calculate_occupancy_rate,
    get_cover_image,
    get_property_address,
    get_property_full_address,
)
from propdesk.services.listing import checked_criteria, empty_state, filter_state
from propdesk.services.repository import SampleRepository, get_repository
from propdesk.services.submissions import FormSubmissionService, get_submission_service
from propdesk.services.validation import FormValidationError

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=PropertyListPage)
async def list_properties(
    q: Optional[str] = Query(None, description="Matches name, city or state"),
    property_type: Optional[str] = Query(None, alias="type"),
    status_filter: Optional[str] = Query(None, alias="status"),
    repository: SampleRepository = Depends(get_repository),
):
    """Property search screen."""
    criteria = checked_criteria(PROPERTY_FILTER, q, type=property_type, status=status_filter)
    matches = PROPERTY_FILTER.apply(repository.properties, criteria)

    items = [
        PropertyListItem(
            id=p.id,
            name=p.name,
            city=p.address.city,
            state=p.address.state,
            address_line=get_property_address(p),
            type=p.type,
            status=p.status,
            total_units=p.total_units,
            occupied_units=p.occupied_units,
            occupancy_rate=calculate_occupancy_rate(p),
            image=get_cover_image(p),
            detail_url=navigation.resolve("property_detail", id=p.id),
        )
        for p in matches
    ]

    return PropertyListPage(
        items=items,
        total=len(repository.properties),
        shown=len(items),
        filters=filter_state(criteria),
        options=PROPERTY_FILTER.options(),
        empty_state=None if items else empty_state(
            PROPERTY_FILTER, "properties", navigation.resolve("properties")
        ),
    )


@router.post("", response_model=PropertySubmission)
async def submit_property(
    form: PropertyForm,
    submissions: FormSubmissionService = Depends(get_submission_service),
):
    """Add-property form. The property is validated but never stored."""
    try:
        return await submissions.submit_property(form)
    except FormValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.get("/{property_id}", response_model=PropertyDetail)
async def get_property(
    property_id: str,
    repository: SampleRepository = Depends(get_repository),
):
    """Property detail screen."""
    prop = repository.get_property(property_id)
    if not prop:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")

    manager = repository.get_user(prop.property_manager_id)

    return PropertyDetail(
        record=prop,
        address_line=get_property_address(prop),
        full_address=get_property_full_address(prop),
        occupancy_rate=calculate_occupancy_rate(prop),
        units=list(repository.units_for_property(prop.id)),
        manager=ManagerSummary(
            id=manager.id,
            name=manager.name,
            email=manager.email,
            phone=manager.phone,
        ) if manager else None,
        back_url=navigation.resolve("properties"),
    )
