"""Generic entity filter shared by the list screens.

A screen declares which text fields the free-text query searches and which
categorical fields can be constrained. Criteria are AND-composed; the result
is the ordered sub-sequence of the input records that satisfy every
criterion. Filtering never raises: a field that is missing or of an
unexpected shape simply does not match.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

logger = logging.getLogger(__name__)

ALL = "all"

T = TypeVar("T")


class UnknownFilterValue(ValueError):
    """A categorical value that is not one of the screen's options."""

    def __init__(self, field_name: str, value: str):
        super().__init__(f"Unknown value '{value}' for filter '{field_name}'")
        self.field_name = field_name
        self.value = value


@dataclass(frozen=True)
class TextField:
    """A field searched by the free-text query."""

    name: str
    accessor: Callable[[Any], Any]


@dataclass(frozen=True)
class CategoricalField:
    """A field restricted to a single accepted value, or ``ALL``.

    With ``membership`` the accessor returns a collection and the filter
    matches when the selected value is one of its members.
    """

    name: str
    accessor: Callable[[Any], Any]
    options: Tuple[Tuple[str, str], ...]
    all_label: str = "All"
    membership: bool = False

    @property
    def values(self) -> Tuple[str, ...]:
        return tuple(value for value, _ in self.options)


@dataclass(frozen=True)
class FilterCriteria:
    """Free-text query plus categorical constraints. Missing names mean ``ALL``."""

    query: str = ""
    categorical: Mapping[str, str] = field(default_factory=dict)

    @property
    def normalized_query(self) -> str:
        return self.query.strip().casefold()


def _normalize(value: Any) -> Optional[str]:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value
    return None


def _read(accessor: Callable[[Any], Any], record: Any) -> Any:
    try:
        return accessor(record)
    except (AttributeError, KeyError, TypeError, IndexError):
        return None


class EntityFilter:
    """Criteria-driven filter for one entity type."""

    def __init__(
        self,
        text_fields: Sequence[TextField],
        categorical_fields: Sequence[CategoricalField] = (),
    ):
        self.text_fields = tuple(text_fields)
        self.categorical_fields = {f.name: f for f in categorical_fields}

    def defaults(self) -> FilterCriteria:
        """Reset state: empty query, every categorical filter set to ``ALL``."""
        return FilterCriteria(
            query="",
            categorical={name: ALL for name in self.categorical_fields},
        )

    def criteria(self, query: Optional[str] = None, **categorical: Optional[str]) -> FilterCriteria:
        """Build criteria for this screen, filling unspecified filters with ``ALL``."""
        values = {name: ALL for name in self.categorical_fields}
        for name, value in categorical.items():
            if value is not None:
                values[name] = value
        return FilterCriteria(query=query or "", categorical=values)

    def validate(self, criteria: FilterCriteria) -> FilterCriteria:
        """Reject categorical names or values the screen does not offer."""
        for name, value in criteria.categorical.items():
            categorical_field = self.categorical_fields.get(name)
            if categorical_field is None:
                raise UnknownFilterValue(name, value)
            if value != ALL and value not in categorical_field.values:
                raise UnknownFilterValue(name, value)
        return criteria

    def options(self) -> Dict[str, List[Dict[str, str]]]:
        """Select-control options per categorical filter, ``ALL`` first."""
        return {
            name: [{"value": ALL, "label": categorical_field.all_label}]
            + [{"value": value, "label": label} for value, label in categorical_field.options]
            for name, categorical_field in self.categorical_fields.items()
        }

    def _matches_query(self, record: Any, needle: str) -> bool:
        if not needle:
            return True
        for text_field in self.text_fields:
            value = _normalize(_read(text_field.accessor, record))
            if value is not None and needle in value.casefold():
                return True
        return False

    def _matches_constraint(self, record: Any, categorical_field: CategoricalField, wanted: str) -> bool:
        if wanted == ALL:
            return True
        value = _read(categorical_field.accessor, record)
        if categorical_field.membership:
            if value is None or isinstance(value, (str, bytes)):
                return False
            try:
                members = list(value)
            except TypeError:
                return False
            return any(_normalize(member) == wanted for member in members)
        return _normalize(value) == wanted

    def matches(self, record: Any, criteria: FilterCriteria) -> bool:
        if not self._matches_query(record, criteria.normalized_query):
            return False
        for name, wanted in criteria.categorical.items():
            categorical_field = self.categorical_fields.get(name)
            if categorical_field is None:
                if wanted != ALL:
                    return False
                continue
            if not self._matches_constraint(record, categorical_field, wanted):
                return False
        return True

    def apply(self, records: Iterable[T], *criteria: FilterCriteria) -> List[T]:
        """Records satisfying every given criteria set, in original order."""
        result = [
            record
            for record in records
            if all(self.matches(record, c) for c in criteria)
        ]
        logger.debug(f"[FILTER] {len(result)} record(s) matched {len(criteria)} criteria set(s)")
        return result
