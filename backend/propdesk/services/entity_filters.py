"""Filter definitions for the properties, vendors and tenants screens."""

from propdesk.models.enums import (
    ACTIVE_STATUS_LABELS,
    PROPERTY_STATUS_LABELS,
    PROPERTY_TYPE_LABELS,
    VENDOR_SPECIALTY_LABELS,
)
from propdesk.services.filtering import CategoricalField, EntityFilter, TextField
from propdesk.services.repository import SampleRepository


def _options(labels):
    return tuple((member.value, label) for member, label in labels.items())


def _active_status(record) -> str:
    return "active" if record.is_active else "inactive"


PROPERTY_FILTER = EntityFilter(
    text_fields=[
        TextField("name", lambda p: p.name),
        TextField("city", lambda p: p.address.city),
        TextField("state", lambda p: p.address.state),
    ],
    categorical_fields=[
        CategoricalField(
            "type",
            lambda p: p.type,
            options=_options(PROPERTY_TYPE_LABELS),
            all_label="All Types",
        ),
        CategoricalField(
            "status",
            lambda p: p.status,
            options=_options(PROPERTY_STATUS_LABELS),
            all_label="All Statuses",
        ),
    ],
)

VENDOR_FILTER = EntityFilter(
    text_fields=[
        TextField("name", lambda v: v.name),
        TextField("email", lambda v: v.email),
        TextField("phone", lambda v: v.phone),
    ],
    categorical_fields=[
        CategoricalField(
            "specialty",
            lambda v: v.specialties,
            options=_options(VENDOR_SPECIALTY_LABELS),
            all_label="All Specialties",
            membership=True,
        ),
        CategoricalField(
            "status",
            _active_status,
            options=_options(ACTIVE_STATUS_LABELS),
            all_label="All Statuses",
        ),
    ],
)


def build_tenant_filter(repository: SampleRepository) -> EntityFilter:
    """Tenant filter; the property filter follows the tenant's unit."""

    def tenant_property_id(tenant):
        prop = repository.property_for_unit(tenant.current_unit_id)
        return prop.id if prop else None

    return EntityFilter(
        text_fields=[
            TextField("name", lambda t: t.name),
            TextField("email", lambda t: t.email),
            TextField("phone", lambda t: t.phone),
        ],
        categorical_fields=[
            CategoricalField(
                "status",
                _active_status,
                options=_options(ACTIVE_STATUS_LABELS),
                all_label="All Statuses",
            ),
            CategoricalField(
                "property",
                tenant_property_id,
                options=tuple((p.id, p.name) for p in repository.properties),
                all_label="All Properties",
            ),
        ],
    )
