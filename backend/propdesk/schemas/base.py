"""Base schema utilities."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class RecordSchema(BaseModel):
    """Read-only sample record. Instances cannot be mutated after loading."""

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        frozen=True,
    )


class IDMixin(BaseModel):
    """Mixin for string id field."""

    id: str


class SelectOption(BaseModel):
    """One entry of a select control."""

    value: str
    label: str


class FilterState(BaseModel):
    """Criteria currently applied to a list screen."""

    query: str = ""
    categorical: Dict[str, str] = {}


class EmptyState(BaseModel):
    """'No results' affordance with a one-click reset to default criteria."""

    message: str
    reset_filters: FilterState
    reset_url: str


class ListPageBase(BaseModel):
    """Shared shape of every list screen."""

    total: int
    shown: int
    filters: FilterState
    options: Dict[str, List[SelectOption]]
    empty_state: Optional[EmptyState] = None


class SubmissionResult(BaseModel):
    """Outcome of an add-form submission. Nothing is persisted."""

    success: bool = True
    message: str
    redirect_url: str
