import pytest
from pydantic import ValidationError

from propdesk.services.repository import SampleRepository


def test_sample_collections_load(repository):
    assert len(repository.properties) == 5
    assert len(repository.tenants) == 5
    assert len(repository.vendors) == 5
    assert isinstance(repository.properties, tuple)


def test_records_are_read_only(repository):
    prop = repository.properties[0]
    with pytest.raises(ValidationError):
        prop.name = "Renamed"


def test_occupied_units_cannot_exceed_total():
    with pytest.raises(ValidationError):
        SampleRepository.from_records(
            properties=[
                {
                    "id": "x",
                    "name": "Overbooked",
                    "address": {"street": "1 A St", "city": "B", "state": "C", "zip_code": "12345"},
                    "type": "house",
                    "total_units": 1,
                    "occupied_units": 2,
                }
            ]
        )


def test_vendor_rating_bounds():
    with pytest.raises(ValidationError):
        SampleRepository.from_records(
            vendors=[{"id": "v", "name": "V", "email": "v@v.io", "phone": "1", "rating": 5.5}]
        )


def test_unresolvable_lookups_return_none(repository):
    assert repository.get_property("nope") is None
    assert repository.get_user("user-99") is None
    assert repository.property_for_unit("unit-999") is None
    assert repository.property_for_unit(None) is None


def test_unit_helpers(repository):
    assert [u.id for u in repository.units_for_property("1")] == ["unit-101", "unit-102"]
    assert [u.id for u in repository.available_units()] == ["unit-102", "unit-401"]
    assert repository.property_for_unit("unit-201").name == "Riverside Condos"


def test_related_collections_load(repository):
    assert len(repository.leases) == 6
    assert len(repository.payments) == 5
    assert [m.id for m in repository.requests_for_vendor("vendor-1")] == ["request-1"]
    assert repository.requests_for_vendor("vendor-404") == ()


def test_lease_cannot_end_before_it_starts():
    with pytest.raises(ValidationError):
        SampleRepository.from_records(
            leases=[
                {
                    "id": "l",
                    "tenant_id": "t",
                    "unit_id": "u",
                    "property_id": "p",
                    "start_date": "2026-01-01",
                    "end_date": "2025-01-01",
                }
            ]
        )
