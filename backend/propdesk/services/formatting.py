"""Display helpers shared by the screens."""

import math
from typing import Optional

from propdesk.schemas.property import Property, Unit

PLACEHOLDER_IMAGE = "/placeholder.svg"


def get_property_address(prop: Property) -> str:
    address = prop.address
    return f"{address.street}, {address.city}, {address.state} {address.zip_code}"


def get_property_full_address(prop: Property) -> str:
    return f"{get_property_address(prop)}, {prop.address.country}"


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round with halves going up, so 12.5 becomes 13 (not 12 as with ``round``)."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def calculate_occupancy_rate(prop: Property) -> int:
    """Whole-number occupancy percentage; 0 for a property without units."""
    if prop.total_units == 0:
        return 0
    return int(round_half_up(prop.occupied_units / prop.total_units * 100))


def calculate_percentage(part: int, total: int) -> float:
    if total == 0:
        return 0.0
    return round_half_up(part / total * 100, 1)


def get_cover_image(prop: Property) -> str:
    return prop.images[0] if prop.images else PLACEHOLDER_IMAGE


def get_unit_display_name(unit: Unit, prop: Optional[Property] = None) -> str:
    name = f"Unit {unit.number}"
    if prop is not None:
        return f"{prop.name} - {name}"
    return name


def get_contact_line(email: str, phone: str) -> str:
    return f"{email} | {phone}"
