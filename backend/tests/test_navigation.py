import pytest

from propdesk.models.enums import UserRole
from propdesk.services.navigation import (
    UnknownDestinationError,
    build_navigation,
    is_active,
    resolve,
)


def test_resolve_detail_destination():
    assert resolve("property_detail", id="3") == "/property/3"
    assert resolve("vendor_add") == "/vendors/add"


def test_resolve_unknown_destination():
    with pytest.raises(UnknownDestinationError):
        resolve("spaceport")


def test_resolve_missing_parameter():
    with pytest.raises(KeyError):
        resolve("tenant_detail")


def test_anonymous_navigation():
    shell = build_navigation(None, "/properties")
    assert [item.label for item in shell.items] == ["Home", "Properties"]
    assert [item.active for item in shell.items] == [False, True]


def test_role_navigation_marks_current_screen_only():
    shell = build_navigation(UserRole.PROPERTY_MANAGER, "/vendors")
    active = [item.href for item in shell.items if item.active]
    assert active == ["/vendors"]

    nested = build_navigation(UserRole.PROPERTY_MANAGER, "/vendors/vendor-2")
    assert not any(item.active for item in nested.items)
    assert "Settings" not in [item.label for item in shell.items]


def test_admin_has_settings_and_vendor_role_is_minimal():
    admin = build_navigation(UserRole.ADMIN)
    assert admin.items[-1].label == "Settings"

    vendor = build_navigation(UserRole.VENDOR)
    assert [item.href for item in vendor.items] == ["/dashboard", "/assignments", "/messages"]


def test_is_active_rules():
    assert is_active("/", "/")
    assert not is_active("/", "/properties")
    assert is_active("/tenants", "/tenants")
    assert not is_active("/tenants", "/tenants/tenant-1/edit")
    assert not is_active("/tenants", "/tenantsx")
