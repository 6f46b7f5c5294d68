from types import SimpleNamespace

import pytest

from propdesk.services.entity_filters import PROPERTY_FILTER, VENDOR_FILTER
from propdesk.services.filtering import (
    ALL,
    CategoricalField,
    EntityFilter,
    FilterCriteria,
    TextField,
    UnknownFilterValue,
)
from propdesk.services.repository import SampleRepository


def _property(pid, name, city, state="IL", type_="apartment", status="active"):
    return {
        "id": pid,
        "name": name,
        "address": {"street": "1 Main St", "city": city, "state": state, "zip_code": "62704"},
        "type": type_,
        "status": status,
        "total_units": 10,
        "occupied_units": 5,
    }


@pytest.fixture
def three_properties():
    repo = SampleRepository.from_records(
        properties=[
            _property("1", "Oakwood Apartments", "Springfield"),
            _property("2", "Riverside Condos", "Rivertown", state="OR", type_="condo"),
            _property("3", "Downtown Lofts", "Metro City", state="NY", status="maintenance"),
        ]
    )
    return list(repo.properties)


@pytest.fixture
def two_vendors():
    repo = SampleRepository.from_records(
        vendors=[
            {"id": "v1", "name": "Pipes Inc", "email": "a@pipes.example", "phone": "555-0001",
             "specialties": ["plumbing"]},
            {"id": "v2", "name": "Volt & Vent", "email": "b@volt.example", "phone": "555-0002",
             "specialties": ["electrical", "hvac"]},
        ]
    )
    return list(repo.vendors)


def _names(records):
    return [r.name for r in records]


def test_query_matches_substring_of_city(three_properties):
    result = PROPERTY_FILTER.apply(three_properties, PROPERTY_FILTER.criteria("river"))
    assert _names(result) == ["Riverside Condos"]


def test_defaults_return_collection_unchanged(three_properties):
    result = PROPERTY_FILTER.apply(three_properties, PROPERTY_FILTER.defaults())
    assert result == three_properties


def test_query_is_case_insensitive(three_properties):
    upper = PROPERTY_FILTER.apply(three_properties, PROPERTY_FILTER.criteria("DOWNTOWN"))
    lower = PROPERTY_FILTER.apply(three_properties, PROPERTY_FILTER.criteria("downtown"))
    assert upper == lower
    assert _names(upper) == ["Downtown Lofts"]


def test_whitespace_query_matches_everything(three_properties):
    result = PROPERTY_FILTER.apply(three_properties, PROPERTY_FILTER.criteria("   "))
    assert result == three_properties


def test_query_searches_state(three_properties):
    result = PROPERTY_FILTER.apply(three_properties, PROPERTY_FILTER.criteria("ny"))
    assert _names(result) == ["Downtown Lofts"]


def test_result_is_ordered_subset(three_properties):
    result = PROPERTY_FILTER.apply(three_properties, PROPERTY_FILTER.criteria("o"))
    positions = [three_properties.index(r) for r in result]
    assert positions == sorted(positions)
    assert all(r in three_properties for r in result)


def test_categorical_equality(three_properties):
    criteria = PROPERTY_FILTER.criteria(type="condo")
    assert _names(PROPERTY_FILTER.apply(three_properties, criteria)) == ["Riverside Condos"]


def test_all_sentinel_means_no_constraint(three_properties):
    criteria = PROPERTY_FILTER.criteria(type=ALL, status=ALL)
    assert PROPERTY_FILTER.apply(three_properties, criteria) == three_properties


def test_criteria_compose_with_and(three_properties):
    c1 = PROPERTY_FILTER.criteria("o")
    c2 = PROPERTY_FILTER.criteria(type="apartment")
    combined = PROPERTY_FILTER.criteria("o", type="apartment")

    chained = PROPERTY_FILTER.apply(PROPERTY_FILTER.apply(three_properties, c1), c2)
    reversed_chain = PROPERTY_FILTER.apply(PROPERTY_FILTER.apply(three_properties, c2), c1)

    assert chained == PROPERTY_FILTER.apply(three_properties, combined)
    assert chained == reversed_chain
    assert chained == PROPERTY_FILTER.apply(three_properties, c1, c2)
    assert _names(chained) == ["Oakwood Apartments", "Downtown Lofts"]


def test_specialty_filter_is_membership(two_vendors):
    hvac = VENDOR_FILTER.apply(two_vendors, VENDOR_FILTER.criteria(specialty="hvac"))
    assert [v.id for v in hvac] == ["v2"]

    electrical = VENDOR_FILTER.apply(two_vendors, VENDOR_FILTER.criteria(specialty="electrical"))
    assert [v.id for v in electrical] == ["v2"]

    plumbing = VENDOR_FILTER.apply(two_vendors, VENDOR_FILTER.criteria(specialty="plumbing"))
    assert [v.id for v in plumbing] == ["v1"]


def test_vendor_query_searches_email_and_phone(two_vendors):
    assert [v.id for v in VENDOR_FILTER.apply(two_vendors, VENDOR_FILTER.criteria("@VOLT"))] == ["v2"]
    assert [v.id for v in VENDOR_FILTER.apply(two_vendors, VENDOR_FILTER.criteria("0001"))] == ["v1"]


def test_empty_result_then_reset_restores_everything(three_properties):
    criteria = PROPERTY_FILTER.criteria("no such place", type="commercial")
    assert PROPERTY_FILTER.apply(three_properties, criteria) == []

    reset = PROPERTY_FILTER.defaults()
    assert reset.query == ""
    assert dict(reset.categorical) == {"type": ALL, "status": ALL}
    assert PROPERTY_FILTER.apply(three_properties, reset) == three_properties


def test_missing_fields_are_non_matches_not_errors():
    entity_filter = EntityFilter(
        text_fields=[TextField("city", lambda r: r.address.city)],
        categorical_fields=[
            CategoricalField("tags", lambda r: r.tags, options=(("x", "X"),), membership=True),
        ],
    )
    records = [
        SimpleNamespace(address=SimpleNamespace(city="Springfield"), tags=["x"]),
        SimpleNamespace(tags=None),
        SimpleNamespace(address=SimpleNamespace(city=None), tags="x"),
    ]

    assert entity_filter.apply(records, entity_filter.criteria("spring")) == records[:1]
    assert entity_filter.apply(records, entity_filter.criteria(tags="x")) == records[:1]


def test_unknown_categorical_name_does_not_match():
    records = [SimpleNamespace(name="a")]
    entity_filter = EntityFilter(text_fields=[TextField("name", lambda r: r.name)])
    criteria = FilterCriteria(categorical={"colour": "red"})
    assert entity_filter.apply(records, criteria) == []


def test_omitted_categorical_name_means_all(three_properties):
    criteria = FilterCriteria(query="", categorical={"status": "active"})
    assert [p.name for p in PROPERTY_FILTER.apply(three_properties, criteria)] == [
        "Oakwood Apartments",
        "Riverside Condos",
    ]
    assert PROPERTY_FILTER.apply(three_properties, criteria) == PROPERTY_FILTER.apply(
        three_properties, PROPERTY_FILTER.criteria(status="active")
    )


def test_validate_rejects_unknown_values():
    with pytest.raises(UnknownFilterValue):
        PROPERTY_FILTER.validate(PROPERTY_FILTER.criteria(type="castle"))
    with pytest.raises(UnknownFilterValue):
        PROPERTY_FILTER.validate(FilterCriteria(categorical={"colour": ALL}))

    criteria = PROPERTY_FILTER.criteria(type="house", status=ALL)
    assert PROPERTY_FILTER.validate(criteria) is criteria


def test_options_list_all_first():
    options = VENDOR_FILTER.options()
    assert options["specialty"][0] == {"value": ALL, "label": "All Specialties"}
    assert {"value": "pest_control", "label": "Pest Control"} in options["specialty"]
    assert [o["value"] for o in options["status"]] == [ALL, "active", "inactive"]
