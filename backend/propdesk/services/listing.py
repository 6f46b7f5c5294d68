"""Shared pieces of the list screens: filter echo, options and empty state."""

from typing import Optional

from fastapi import HTTPException, status

from propdesk.schemas.base import EmptyState, FilterState
from propdesk.services.filtering import EntityFilter, FilterCriteria, UnknownFilterValue


def checked_criteria(entity_filter: EntityFilter, query: Optional[str], **categorical: Optional[str]) -> FilterCriteria:
    """Criteria from query parameters; unknown select values are a 422."""
    criteria = entity_filter.criteria(query, **categorical)
    try:
        return entity_filter.validate(criteria)
    except UnknownFilterValue as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


def filter_state(criteria: FilterCriteria) -> FilterState:
    return FilterState(query=criteria.query, categorical=dict(criteria.categorical))


def empty_state(entity_filter: EntityFilter, noun: str, reset_url: str) -> EmptyState:
    """'No results' affordance; resetting restores the default criteria."""
    return EmptyState(
        message=f"No {noun} found matching your criteria.",
        reset_filters=filter_state(entity_filter.defaults()),
        reset_url=reset_url,
    )
