import pytest

from propdesk.services.formatting import (
    calculate_occupancy_rate,
    calculate_percentage,
    get_unit_display_name,
    round_half_up,
)
from propdesk.schemas.property import Address, Property, Unit


def _property(total_units, occupied_units):
    return Property(
        id="p",
        name="Test Property",
        address=Address(street="1 Main St", city="Springfield", state="IL", zip_code="62704"),
        type="apartment",
        total_units=total_units,
        occupied_units=occupied_units,
    )


@pytest.mark.parametrize(
    "total,occupied,rate",
    [
        (8, 1, 13),
        (24, 20, 83),
        (2, 1, 50),
        (0, 0, 0),
    ],
)
def test_occupancy_rate_rounds_halves_up(total, occupied, rate):
    assert calculate_occupancy_rate(_property(total, occupied)) == rate


def test_percentage_keeps_one_decimal_rounding_halves_up():
    assert calculate_percentage(1, 16) == 6.3
    assert calculate_percentage(37, 54) == 68.5
    assert calculate_percentage(3, 0) == 0.0


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(0.5) == 1
    assert round_half_up(2.45, 1) == 2.5
    assert round_half_up(2.44, 1) == 2.4


def test_unit_display_name():
    unit = Unit(id="u", property_id="p", number="7", bedrooms=1, bathrooms=1, area=500, rent=900)
    assert get_unit_display_name(unit) == "Unit 7"
    assert get_unit_display_name(unit, _property(1, 0)) == "Test Property - Unit 7"
